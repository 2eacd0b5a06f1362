"""
numparser - accumulator.py
Incremental number accumulator

(c) 2026 the numparser authors
This file is released under the GNU GPL version 3 or later.
"""

# The accumulator receives a number as a stream of events from an external tokeniser:
# mantissa digits, exponent digits, the radix point and the two signs. Apart from the
# digits, which must arrive most significant first, the events may come in any order.
#
# The mantissa starts out as an unsigned integer and is converted to a double once
# it no longer fits in 64 bits. finalize() decides the final type:
#
#     integer  if no radix point, no exponent and the signed value fits in an int64
#     float    otherwise; the mantissa is scaled by base**n in double precision
#
# where n is the exponent less the number of digits after the radix point.

import logging

from .config import MAX_DIGITS, MAX_EXPONENT, MAX_INT, MAX_POS_INT
from .error import NotFinalized, KindMismatch


# kinds of number
INT = 'int'
FLOAT = 'float'

# radix offset if no radix point has been set
UNSET = -1


##############################################################################
# mantissa values

class Number(object):
    """Abstract base class for mantissa and result values."""

    kind = None

    def __init__(self, value):
        """Initialise the value."""
        self.value = value

    def __repr__(self):
        """String representation for debugging."""
        return '%s[%r]' % (self.kind, self.value)

    def push(self, digit, base):
        """Append a least significant digit, return the new mantissa."""
        raise NotImplementedError()

    def to_float(self):
        """Convert to Float."""
        raise NotImplementedError()


class Integer(Number):
    """Unsigned integer mantissa, or signed integer result."""

    kind = INT

    def push(self, digit, base):
        """Append a digit; returns a Float if the integer would overflow."""
        # check if there is room for another digit
        if self.value > MAX_INT // base:
            return self.to_float().push(digit, base)
        value = self.value * base
        # the magnitude may reach but not exceed that of the most negative int64
        if value > MAX_INT - digit:
            return Float(float(value) + digit)
        return Integer(value + digit)

    def to_float(self):
        """Convert to Float."""
        return Float(float(self.value))


class Float(Number):
    """Double-precision mantissa or result."""

    kind = FLOAT

    def push(self, digit, base):
        """Append a digit."""
        return Float(self.value * base + digit)

    def to_float(self):
        """Convert to Float (no-op)."""
        return self


def power(base, n):
    """Raise base to a non-negative integer power by repeated squaring, in double precision."""
    d = float(base)
    e = 1.0
    while n:
        if n & 1:
            e *= d
        n >>= 1
        # may reach infinity, that's fine
        d *= d
    return e


##############################################################################
# accumulator

class Accumulator(object):
    """Build an integer or float from digits and flags supplied by a tokeniser."""

    def __init__(self, base):
        """Initialise an empty number; base must be in [2, 255] and is not checked."""
        self.base = base
        self.digit_count = 0
        self.radix_offset = UNSET
        self.exponent_value = 0
        self.mantissa_negative = False
        self.exponent_negative = False
        self.has_exponent = False
        # integer magnitude did not fit and was converted to float
        self.overflowed = False
        # silently dropped input
        self.digits_dropped = False
        self.exponent_clamped = False
        self._mantissa = Integer(0)
        self._result = None

    def __repr__(self):
        """String representation for debugging."""
        return '<Accumulator base=%d %r digits=%d radix=%d exp=%s%d%s%s>' % (
            self.base, self._mantissa, self.digit_count, self.radix_offset,
            '-' if self.exponent_negative else '+', self.exponent_value,
            ' neg' if self.mantissa_negative else '',
            ' final=%r' % (self._result,) if self._result is not None else '',
        )

    @property
    def kind(self):
        """Kind of the number, INT or FLOAT; FLOAT once either mantissa or result is float."""
        if self._result is not None and self._result.kind == FLOAT:
            return FLOAT
        return self._mantissa.kind

    @property
    def mantissa_kind(self):
        """Kind of the mantissa accumulated so far, INT or FLOAT."""
        return self._mantissa.kind

    @property
    def mantissa(self):
        """Mantissa accumulated so far, as Integer or Float."""
        return self._mantissa

    @property
    def magnitude(self):
        """Unsigned mantissa value accumulated so far."""
        return self._mantissa.value

    def add_digit(self, digit):
        """Add the next integer or fraction digit."""
        if self.digit_count >= MAX_DIGITS:
            if not self.digits_dropped:
                logging.debug('Number longer than %d digits, ignoring further digits', MAX_DIGITS)
            self.digits_dropped = True
            return
        mantissa = self._mantissa.push(digit, self.base)
        if mantissa.kind != self._mantissa.kind:
            logging.debug(
                'Integer overflow at digit %d, converting to float', self.digit_count + 1
            )
            self.overflowed = True
        self._mantissa = mantissa
        self.digit_count += 1

    def add_exponent_digit(self, digit):
        """Add the next exponent digit; ignored once the exponent is out of range."""
        if self.exponent_value >= MAX_EXPONENT:
            if not self.exponent_clamped:
                logging.debug('Exponent exceeds %d, ignoring further digits', MAX_EXPONENT)
            self.exponent_clamped = True
            return
        self.exponent_value = self.exponent_value * self.base + digit
        self.has_exponent = True

    def set_radix_point(self):
        """Set the radix point at the current digit offset."""
        self.radix_offset = self.digit_count

    def set_negative(self, negative=True):
        """Set the number sign."""
        self.mantissa_negative = bool(negative)

    def set_exponent_negative(self, negative=True):
        """Set the exponent sign."""
        self.exponent_negative = bool(negative)

    def finalize(self):
        """Calculate the final number and return its kind."""
        mantissa = self._mantissa
        # an int64 holds one more negative value than positive ones
        positive_overflow = (
            mantissa.kind == INT and not self.mantissa_negative and mantissa.value > MAX_POS_INT
        )
        if positive_overflow:
            logging.debug('Positive integer overflow, converting to float')
            self.overflowed = True
        if positive_overflow or self.has_exponent or self.radix_offset != UNSET:
            mantissa = mantissa.to_float()
        if mantissa.kind == INT:
            if self.mantissa_negative:
                self._result = Integer(-mantissa.value)
            else:
                self._result = Integer(mantissa.value)
        else:
            self._result = Float(self._scale(mantissa.value))
        return self._result.kind

    def _scale(self, value):
        """Apply sign, exponent and radix point to a float mantissa."""
        n = -self.exponent_value if self.exponent_negative else self.exponent_value
        if self.radix_offset != UNSET:
            n -= self.digit_count - self.radix_offset
        divide = n < 0
        e = power(self.base, -n if divide else n)
        if self.mantissa_negative:
            value = -value
        if divide:
            return value / e
        return value * e

    # results

    @property
    def result(self):
        """Final value as Integer or Float; None before finalize()."""
        return self._result

    @property
    def value(self):
        """Final value as Python int or float."""
        if self._result is None:
            raise NotFinalized()
        return self._result.value

    @property
    def int_value(self):
        """Final signed integer value."""
        return self._get_result(INT)

    @property
    def float_value(self):
        """Final floating-point value."""
        return self._get_result(FLOAT)

    def _get_result(self, kind):
        """Final value, if it is of the requested kind."""
        if self._result is None:
            raise NotFinalized()
        if self._result.kind != kind:
            raise KindMismatch(kind, self._result.kind)
        return self._result.value


def accumulate(
        base, digits, fraction=None, exponent=(), negative=False, exponent_negative=False
    ):
    """
    Accumulate a number from separated digit sequences and return (kind, value).
    A radix point is set between digits and fraction unless fraction is None.
    """
    acc = Accumulator(base)
    for digit in digits:
        acc.add_digit(digit)
    if fraction is not None:
        acc.set_radix_point()
        for digit in fraction:
            acc.add_digit(digit)
    for digit in exponent:
        acc.add_exponent_digit(digit)
    acc.set_negative(negative)
    acc.set_exponent_negative(exponent_negative)
    kind = acc.finalize()
    return kind, acc.value
