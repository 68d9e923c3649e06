"""
Conversions between arabic numbers and roman numerals
"""

from .roman import to_number, to_numeral
from .table import (
    MAX_NUMBER, MIN_NUMBER, NUMERAL_VALUES, ROMAN_NUMERALS, SUBTRACTIVE_PAIRS,
    SYMBOLS, entries, value_of,
)
from .validation import (
    INVALID_CHARACTER, INVALID_REPETITION, INVALID_SUBTRACTION, NULL_INPUT,
    InvalidNumeral, NumeralError, OutOfRange,
    is_valid_numeral, validate_numeral, validate_range,
)


__all__ = [
    'to_number', 'to_numeral',
    'MAX_NUMBER', 'MIN_NUMBER', 'NUMERAL_VALUES', 'ROMAN_NUMERALS',
    'SUBTRACTIVE_PAIRS', 'SYMBOLS', 'entries', 'value_of',
    'INVALID_CHARACTER', 'INVALID_REPETITION', 'INVALID_SUBTRACTION', 'NULL_INPUT',
    'InvalidNumeral', 'NumeralError', 'OutOfRange',
    'is_valid_numeral', 'validate_numeral', 'validate_range',
]
