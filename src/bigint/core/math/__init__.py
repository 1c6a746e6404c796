"""
Core math modules для bigint

Беззнаковые примитивы над магнитудами (little-endian списки 32-битных слов)
и алгоритмы деления, побитовых операций и десятичного кодека.
"""

# Magnitude store
from bigint.core.math.magnitude import (
    # Word constants
    BASE,
    HALF_BASE,
    WORD_BITS,
    WORD_MASK,
    # Canonicalization
    is_zero,
    trim,
    # Comparison
    compare_magnitudes,
    less_magnitude,
    # Conversion
    magnitude_from_int,
    magnitude_to_int,
    validate_words,
)

# Magnitude arithmetic
from bigint.core.math.arithmetic import (
    add_magnitudes,
    add_word,
    divmod_word,
    mul_magnitudes,
    mul_word,
    shift_left_magnitude,
    shift_right_magnitude,
    sub_magnitudes,
    sub_word,
)

# Long division
from bigint.core.math.division import (
    divmod_magnitudes,
    normalization_shift,
)

# Two's-complement bitwise
from bigint.core.math.bitwise import (
    and_words,
    apply_bitwise,
    negate_words,
    or_words,
    twos_complement_words,
    xor_words,
)

# Decimal codec
from bigint.core.math.decimal_codec import (
    DECIMAL_CHUNK_BASE,
    DECIMAL_CHUNK_DIGITS,
    format_decimal,
    parse_decimal,
)

__all__ = [
    # Magnitude: Word constants
    "BASE",
    "HALF_BASE",
    "WORD_BITS",
    "WORD_MASK",
    # Magnitude: Canonicalization
    "is_zero",
    "trim",
    # Magnitude: Comparison
    "compare_magnitudes",
    "less_magnitude",
    # Magnitude: Conversion
    "magnitude_from_int",
    "magnitude_to_int",
    "validate_words",
    # Arithmetic
    "add_magnitudes",
    "add_word",
    "divmod_word",
    "mul_magnitudes",
    "mul_word",
    "shift_left_magnitude",
    "shift_right_magnitude",
    "sub_magnitudes",
    "sub_word",
    # Division
    "divmod_magnitudes",
    "normalization_shift",
    # Bitwise
    "and_words",
    "apply_bitwise",
    "negate_words",
    "or_words",
    "twos_complement_words",
    "xor_words",
    # Decimal codec: Constants
    "DECIMAL_CHUNK_BASE",
    "DECIMAL_CHUNK_DIGITS",
    # Decimal codec: Functions
    "format_decimal",
    "parse_decimal",
]
