"""
Conversion functions for roman numbers
"""

from .table import entries, value_of
from .validation import validate_numeral, validate_range


def to_numeral(number):
    """Returns the roman numeral for `number`, which must be between 1 and 3999.

    >>> to_numeral(1994)
    'MCMXCIV'
    """
    if not isinstance(number, int):
        raise TypeError("expected integer, got %s" % type(number))
    validate_range(number)
    r = []
    remaining = number
    while remaining:
        for numeral, value in entries():
            if remaining // value > 0:
                r.append(numeral)
                remaining -= value
                break
    return ''.join(r)


def to_number(numeral):
    """Returns the integer value of a roman numeral.

    >>> to_number('MCMXCIV')
    1994
    """
    validate_numeral(numeral)
    r = 0
    i = 0
    length = len(numeral)
    while i < length:
        char = numeral[i]
        if i + 1 < length:
            pair = numeral[i:i+2]
            if value_of(char) < value_of(pair[1]):
                r += value_of(pair)
                i += 2
                continue
        r += value_of(char)
        i += 1
    return r
