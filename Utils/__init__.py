from .EmojiTable import *
