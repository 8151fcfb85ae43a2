from typing import *

from .value import Immediate, Computation, Variant, Value, new, new_lazy
from .fmap import fmap
from .flatmap import flatmap

__version__ = "0.1.0"
