from .GameEnums import *
from .Executions import *
