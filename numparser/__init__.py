"""
numparser - incremental number accumulator for tokenisers

(c) 2026 the numparser authors
This file is released under the GNU GPL version 3 or later.
"""

from .data import NAME, VERSION, AUTHOR, COPYRIGHT
from .accumulator import Accumulator, Integer, Float, INT, FLOAT, UNSET
from .accumulator import accumulate, power
from .error import AccumulatorError, NotFinalized, KindMismatch, check_base
from .config import Lumberjack

__version__ = VERSION
