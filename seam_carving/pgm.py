"""
Reader for plain-text greyscale PGM ("P2") rasters.

Expected layout:

    P2                  ; magic token
    # comment           ; optional, only directly after the magic token
    columns rows
    max_value
    pixel data          ; whitespace separated, row-major

Only the first rows * columns values of the pixel data are used.
"""

import torch
from typing import Tuple

MAGIC = 'P2'
# grids are stored as int64
MAX_PIXEL_VALUE = torch.iinfo(torch.long).max


class PGMError(ValueError):
    """Base class for malformed PGM input."""


class PGMFormatError(PGMError):
    """Header or pixel data cannot be parsed."""


class PGMRangeError(PGMError):
    """A pixel value lies outside [0, max_value]."""


def _parse_int(token: str, what: str, source: str) -> int:
    digits = token[1:] if token.startswith('-') else token
    if not (digits.isascii() and digits.isdigit()):
        raise PGMFormatError(f"{source}: {what} is not an integer: '{token}'")
    return int(token)


def parse_pgm(text: str, source: str = '<string>') -> Tuple[torch.Tensor, int]:
    """
    Parse the contents of a P2 file.

    Args:
        text: File contents
        source: Name used in error messages

    Returns:
        (grid, max_value) where grid is a (rows, columns) torch.long tensor
    """
    lines = text.splitlines()
    pos = 0

    def next_line():
        nonlocal pos
        if pos >= len(lines):
            return None
        line = lines[pos]
        pos += 1
        return line

    magic = next_line()
    if magic is None or magic.rstrip() != MAGIC:
        raise PGMFormatError(
            f"{source}: file format was read as '{(magic or '').rstrip()}', "
            f"while the only supported format is '{MAGIC}'")

    if pos < len(lines) and lines[pos].startswith('#'):
        pos += 1

    dims_line = next_line()
    dims = (dims_line or '').split()
    if len(dims) < 2:
        raise PGMFormatError(f"{source}: could not read image dimensions from '{dims_line or ''}'")
    columns = _parse_int(dims[0], 'column count', source)
    rows = _parse_int(dims[1], 'row count', source)
    if columns <= 0 or rows <= 0:
        raise PGMFormatError(
            f"{source}: image dimensions must be positive, got {columns} x {rows} "
            f"(columns x rows)")

    max_line = next_line()
    if max_line is None or not max_line.strip():
        raise PGMFormatError(f"{source}: missing maximum pixel value")
    max_value = _parse_int(max_line.strip(), 'maximum pixel value', source)
    if max_value <= 0:
        raise PGMFormatError(f"{source}: maximum pixel value must be positive, got {max_value}")
    if max_value > MAX_PIXEL_VALUE:
        raise PGMFormatError(
            f"{source}: maximum pixel value {max_value} exceeds the supported "
            f"limit of {MAX_PIXEL_VALUE}")

    tokens = ' '.join(lines[pos:]).split()
    n_pixels = rows * columns
    if len(tokens) < n_pixels:
        raise PGMFormatError(
            f"{source}: expected {n_pixels} pixel values ({columns} x {rows}), "
            f"found {len(tokens)}")

    pixels = [_parse_int(tok, 'pixel value', source) for tok in tokens[:n_pixels]]
    for value in pixels:
        if value < 0 or value > max_value:
            raise PGMRangeError(
                f"{source}: pixel value {value} falls outside the acceptable "
                f"range of [0, {max_value}]")

    grid = torch.tensor(pixels, dtype=torch.long).view(rows, columns)
    return grid, max_value


def load_pgm(path) -> Tuple[torch.Tensor, int]:
    """
    Load a P2 file from disk.

    OSError (missing or unreadable file) propagates to the caller.

    Returns:
        (grid, max_value)
    """
    with open(path, 'rb') as f:
        data = f.read()
    try:
        text = data.decode('ascii')
    except UnicodeDecodeError:
        raise PGMFormatError(f"{path}: not a plain-text pgm file") from None
    return parse_pgm(text, source=str(path))
