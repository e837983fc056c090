from .GameInterface import *
