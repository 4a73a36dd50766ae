__version__ = '0.2.0'

from .container import HashVec, KeyExistsError, ValueRef, hashvec
from .config import Config
from .flags import Flags
from .printing import print_ as print
from .printing import format_ as format
