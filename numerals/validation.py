"""
Checks run on the input of the converters before any conversion work
"""

from .table import MAX_NUMBER, MIN_NUMBER, value_of


NULL_INPUT = 'null input'
INVALID_CHARACTER = 'invalid character'
INVALID_SUBTRACTION = 'invalid subtractive combination'
INVALID_REPETITION = 'invalid consecutive-repeat count'

MESSAGES = {
    NULL_INPUT: "Numeral to convert cannot be null",
    INVALID_CHARACTER: "Invalid numeral",
    INVALID_SUBTRACTION: "Invalid numeral subtraction",
    INVALID_REPETITION: "Invalid number of consecutive numerals",
}


class NumeralError(ValueError):
    pass


class OutOfRange(NumeralError):

    def __init__(self, number):
        super().__init__(
            "Invalid arabic number. Valid numbers are %i - %i" % (MIN_NUMBER, MAX_NUMBER)
        )
        self.number = number


class InvalidNumeral(NumeralError):

    def __init__(self, reason, numeral=None):
        super().__init__(MESSAGES[reason])
        self.reason = reason
        self.numeral = numeral


def integer_contains(number, digit):
    """
    >>> integer_contains(500, 5), integer_contains(100, 5)
    (True, False)
    """
    return str(digit) in str(number)


def max_repetitions(symbol):
    """Returns how many times `symbol` can appear in a row.

    Symbols whose value contains a 5 (V, L and D) can't be repeated at all,
    the others (M, C, X and I) can appear up to three times in a row.
    """
    return 1 if integer_contains(value_of(symbol), 5) else 3


def validate_range(number):
    if number < MIN_NUMBER or number > MAX_NUMBER:
        raise OutOfRange(number)


def validate_numeral(numeral):
    """Raises `InvalidNumeral` if `numeral` isn't a well-formed roman number.

    The string is scanned once from left to right and the first violation
    found is reported. At each position the checks are run in this order:
    the current character, the next character, the subtraction formed by
    the two, and finally the length of the current run of identical
    characters. The run length is only checked when a character is equal to
    the next one, so an overrun is detected as soon as it happens.

    >>> validate_numeral('MCMXCIV')
    >>> validate_numeral('IL')
    Traceback (most recent call last):
        ...
    numerals.validation.InvalidNumeral: Invalid numeral subtraction
    """
    if numeral is None:
        raise InvalidNumeral(NULL_INPUT)
    if not isinstance(numeral, str):
        raise TypeError("expected a string, got %s" % type(numeral))
    consecutive = 1
    length = len(numeral)
    for i, char in enumerate(numeral):
        value = value_of(char)
        if value is None:
            raise InvalidNumeral(INVALID_CHARACTER, numeral)
        if i + 1 == length:
            break
        next_char = numeral[i + 1]
        next_value = value_of(next_char)
        if next_value is None:
            raise InvalidNumeral(INVALID_CHARACTER, numeral)
        if value < next_value and value_of(char + next_char) is None:
            raise InvalidNumeral(INVALID_SUBTRACTION, numeral)
        if char == next_char:
            consecutive += 1
            if consecutive > max_repetitions(char):
                raise InvalidNumeral(INVALID_REPETITION, numeral)
        else:
            consecutive = 1


def is_valid_numeral(numeral):
    """Returns `True` if `numeral` passes `validate_numeral`, `False` otherwise.
    """
    try:
        validate_numeral(numeral)
    except InvalidNumeral:
        return False
    return True
