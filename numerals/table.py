"""
The table of roman symbols, shared by the converters and the validator
"""

ROMAN_NUMERALS = (
    ('M', 1000), ('CM', 900), ('D', 500), ('CD', 400), ('C', 100),
    ('XC', 90), ('L', 50), ('XL', 40), ('X', 10), ('IX', 9), ('V', 5),
    ('IV', 4), ('I', 1)
)

NUMERAL_VALUES = dict(ROMAN_NUMERALS)

SYMBOLS = tuple(numeral for numeral, value in ROMAN_NUMERALS if len(numeral) == 1)
SUBTRACTIVE_PAIRS = tuple(numeral for numeral, value in ROMAN_NUMERALS if len(numeral) == 2)

MIN_NUMBER = 1
MAX_NUMBER = 3999


def value_of(symbol):
    """Returns the value of a symbol or of a subtractive pair, or `None`.

    >>> value_of('X'), value_of('XC'), value_of('XM')
    (10, 90, None)
    """
    return NUMERAL_VALUES.get(symbol)


def entries():
    """Returns the `(symbol, value)` pairs, largest value first.
    """
    return ROMAN_NUMERALS
