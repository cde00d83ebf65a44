from .config import *
from .costs import *
from .errors import *
from .matrix import *
from .solvers import *
from .tour import *
