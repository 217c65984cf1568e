"""
Text format for matrices.

Reading:
    One matrix row per line, numbers separated by whitespace. Leading blank
    lines are skipped; the first blank line after data, or the end of the
    input, ends the matrix. There is no header: the dimensions are inferred
    from the number of lines and values.

Writing:
    Every element right-aligned in a fixed-width field (12 characters by
    default, at least one leading space), 6 fixed fractional digits, no
    grouping separators, one row per line.

Public API:
    load(source, locale)       - Read from a path or an iterable of lines
    loads(text, locale)        - Read from a string
    parse_line(line, locale)   - Numbers of a single line
    format_matrix(matrix)      - Render any MatrixLike as text
    dump(matrix, target)       - Write the rendering to a path or stream
"""

from __future__ import annotations

import io
import logging
import math
import os
import re
from typing import IO, Iterable, Union

from pyreferencing.core.compute.tolerances import (
    DEFAULT_FORMAT,
    US,
    FormatOptions,
    NumberLocale,
    get_locale,
)
from pyreferencing.core.exceptions import ContentFormatError
from pyreferencing.core.protocols import MatrixLike
from pyreferencing.matrix.general import GeneralMatrix

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_SPECIAL = {
    'nan': math.nan,
    '+nan': math.nan,
    '-nan': math.nan,
    'infinity': math.inf,
    '+infinity': math.inf,
    '-infinity': -math.inf,
    'inf': math.inf,
    '+inf': math.inf,
    '-inf': -math.inf,
    '∞': math.inf,
    '-∞': -math.inf,
}

PathOrLines = Union[str, os.PathLike, Iterable[str]]


def parse_number(token: str, locale: NumberLocale = US) -> float:
    """
    Parse one numeric token under the given locale.

    Raises:
        ValueError: If the token is not a number
    """
    special = _SPECIAL.get(token.lower())
    if special is not None:
        return special
    text = token
    if locale.grouping_separator:
        text = text.replace(locale.grouping_separator, '')
    if locale.decimal_separator != '.':
        if '.' in text:
            raise ValueError(f"Unparseable number: {token!r}")
        text = text.replace(locale.decimal_separator, '.')
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"Unparseable number: {token!r}")
    return float(text)


def parse_line(line: str, locale: NumberLocale | str = US) -> list[float]:
    """
    Parse the whitespace-separated numbers of one line.

    Raises:
        ValueError: If a token is not a number
    """
    locale = get_locale(locale)
    return [parse_number(token, locale) for token in line.split()]


def load(source: PathOrLines, locale: NumberLocale | str = US) -> GeneralMatrix:
    """
    Load a matrix until the first blank line or end of input.

    Parameters
    ----------
    source : path or iterable of str
        A file path (opened as UTF-8 text), or any iterable of lines such as
        an open text file, io.StringIO or a list of strings.
    locale : NumberLocale or str
        Decimal conventions of the numbers. Default en_US.

    Returns
    -------
    GeneralMatrix with one row per non-blank line. Empty input gives a
    0x0 matrix.

    Raises
    ------
    ContentFormatError
        If a token is not a number, or if the values cannot be arranged in
        rows of equal length.
    OSError
        Propagated from opening or reading the source.
    """
    locale = get_locale(locale)
    if isinstance(source, (str, os.PathLike)):
        with open(source, encoding='utf-8') as f:
            return _read(f, locale)
    return _read(source, locale)


def loads(text: str, locale: NumberLocale | str = US) -> GeneralMatrix:
    """Load a matrix from a string, see load()."""
    return _read(io.StringIO(text), get_locale(locale))


def _read(lines: Iterable[str], locale: NumberLocale) -> GeneralMatrix:
    data: list[float] = []
    num_row = 0
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            if num_row == 0:
                continue
            break
        try:
            row = parse_line(line, locale)
        except ValueError as e:
            raise ContentFormatError(
                f"Line {line_number}: {e}", line_number=line_number
            ) from e
        data.extend(row)
        num_row += 1

    if num_row == 0:
        return GeneralMatrix(0, 0)
    if len(data) % num_row != 0:
        raise ContentFormatError(
            f"Rows have unequal lengths: {len(data)} values cannot form "
            f"{num_row} rows of equal length"
        )
    num_col = len(data) // num_row
    logger.debug("Loaded %dx%d matrix", num_row, num_col)
    return GeneralMatrix(num_row, num_col, data)


def format_number(value: float, options: FormatOptions = DEFAULT_FORMAT) -> str:
    """Fixed-point text of one value, without padding."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    text = f"{value:.{options.fraction_digits}f}"
    if options.locale.decimal_separator != '.':
        text = text.replace('.', options.locale.decimal_separator)
    return text


def format_matrix(matrix: MatrixLike, options: FormatOptions = DEFAULT_FORMAT) -> str:
    """
    Render any MatrixLike as fixed-width text.

    Each element is right-aligned in a field of options.column_width
    characters, with at least one space before it if the number is wider.
    Every row, the last included, ends with options.line_separator.
    """
    parts: list[str] = []
    for j in range(matrix.num_row):
        for i in range(matrix.num_col):
            text = format_number(matrix.get_element(j, i), options)
            spaces = max(options.column_width - len(text), 1)
            parts.append(' ' * spaces)
            parts.append(text)
        parts.append(options.line_separator)
    return ''.join(parts)


def dump(
    matrix: MatrixLike,
    target: str | os.PathLike | IO[str],
    options: FormatOptions = DEFAULT_FORMAT,
) -> None:
    """
    Write the rendering of a matrix to a path or text stream.

    The output can be read back with load(), using the same locale.
    """
    text = format_matrix(matrix, options)
    if isinstance(target, (str, os.PathLike)):
        with open(target, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
    else:
        target.write(text)
