"""
numparser - error.py
Exceptions and range checks

(c) 2026 the numparser authors
This file is released under the GNU GPL version 3 or later.
"""

from .config import MIN_BASE, MAX_BASE


class AccumulatorError(Exception):
    """Base type for accumulator exceptions."""

    message = u'Accumulator error'

    def __init__(self, message=None):
        """Initialise error."""
        Exception.__init__(self)
        if message is not None:
            self.message = message

    def __repr__(self):
        """String representation of exception."""
        return self.message

    __str__ = __repr__


class NotFinalized(AccumulatorError):
    """Result requested before finalize()."""

    message = u'Number has not been finalized'


class KindMismatch(AccumulatorError):
    """Result requested as the wrong kind."""

    message = u'Number is not of the requested kind'

    def __init__(self, requested, actual):
        """Initialise error."""
        AccumulatorError.__init__(
            self, u'Requested %s result but number is %s' % (requested, actual)
        )
        self.requested = requested
        self.actual = actual


def range_check(lower, upper, *allvars):
    """Check if all variables in list are within the given inclusive range."""
    for v in allvars:
        if v is not None and not (lower <= v <= upper):
            raise ValueError('%r is not in range [%d, %d]' % (v, lower, upper))

def check_base(base):
    """Check that a number base is supported; the accumulator itself does not check."""
    range_check(MIN_BASE, MAX_BASE, base)
    return base
