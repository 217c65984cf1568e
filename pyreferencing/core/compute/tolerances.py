"""
Tolerances, number locales and text format options.

This module is the single place where numeric thresholds and text
conventions are configured:
- Comparison tolerance used by equals() and is_identity() defaults
- Conditioning threshold above which inversion warns
- Number locales for parsing and rendering decimal values
- Fixed-width format options for matrix rendering

Everything here is an immutable constant or a frozen dataclass.
"""

import os
from dataclasses import dataclass, field

import numpy as np

from pyreferencing.core.exceptions import ValidationError


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Exact comparison unless the caller asks otherwise
DEFAULT_TOLERANCE: float = 0.0

# Condition number above which an inversion result is numerically
# meaningless in double precision. Inversion still proceeds, with a warning.
ILL_CONDITIONED_THRESHOLD: float = 1.0 / EPSILON_64


@dataclass(frozen=True)
class NumberLocale:
    """Decimal conventions used to read and write numbers as text."""
    name: str
    decimal_separator: str
    grouping_separator: str | None = None


# English (United States): 1234.5
US = NumberLocale(name='en_US', decimal_separator='.', grouping_separator=',')

# French: 1234,5. The space grouping separator would split tokens, so none.
FRENCH = NumberLocale(name='fr_FR', decimal_separator=',', grouping_separator=None)

# German: 1.234,5
GERMAN = NumberLocale(name='de_DE', decimal_separator=',', grouping_separator='.')

# Locale-independent form: no grouping is ever accepted
ROOT = NumberLocale(name='root', decimal_separator='.', grouping_separator=None)

_LOCALES = {loc.name: loc for loc in (US, FRENCH, GERMAN, ROOT)}


def get_locale(name: str | NumberLocale) -> NumberLocale:
    """Look up a NumberLocale by name ('en_US', 'fr_FR', 'de_DE', 'root')."""
    if isinstance(name, NumberLocale):
        return name
    key = name.replace('-', '_')
    if key in _LOCALES:
        return _LOCALES[key]
    raise ValidationError(
        f"Unknown locale: {name!r}. Available: {sorted(_LOCALES)}"
    )


@dataclass(frozen=True)
class FormatOptions:
    """
    Fixed-width rendering options for matrices.

    Attributes:
        column_width: Minimum width of every element field
        fraction_digits: Fixed number of digits after the decimal separator
        line_separator: Terminator appended after every row
        locale: Decimal separator convention (grouping is never used)
    """
    column_width: int = 12
    fraction_digits: int = 6
    line_separator: str = field(default=os.linesep)
    locale: NumberLocale = US


DEFAULT_FORMAT = FormatOptions()
