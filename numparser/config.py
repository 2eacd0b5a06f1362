"""
numparser - config.py
Limits and logging setup

(c) 2026 the numparser authors
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
import logging


# range of supported number bases
MIN_BASE = 2
MAX_BASE = 255

# mantissa digits beyond this count are dropped
MAX_DIGITS = 32767

# exponent digits are dropped once the exponent reaches this value
# this is the magnitude of the smallest decimal exponent of a double
MAX_EXPONENT = 308

# magnitude ceiling for the integer mantissa: the magnitude of the most negative int64
MAX_INT = 2**63
# largest positive int64
MAX_POS_INT = MAX_INT - 1

# format for log files
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')


##########################################################################
# logging

class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Keep track of the handler we install so we can take it down again."""
        self._handler = None

    def reset(self):
        """Remove our handler from the root logger."""
        root_logger = logging.getLogger()
        if self._handler is not None:
            root_logger.removeHandler(self._handler)
            self._handler = None
        return root_logger

    def prepare(self, logfile=None, debug=False):
        """Set up the global logger; logfile may be a path or an open stream."""
        loglevel = logging.DEBUG if debug else logging.INFO
        root_logger = self.reset()
        root_logger.setLevel(loglevel)
        if not logfile:
            logstream = sys.stderr
        elif isinstance(logfile, str):
            logstream = io.open(logfile, 'a', encoding='utf_8', errors='replace')
        else:
            logstream = logfile
        self._handler = logging.StreamHandler(logstream)
        self._handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(self._handler)
        return root_logger
