# file: src/module1_hamming_codec/bit_utils.py

"""
Bit-array helpers shared by the encoder and decoder.

Codewords are stored as 1-D numpy arrays of dtype uint8, 0-indexed.
Public operations address bits by 1-indexed *position*; the translation
between the two lives here and nowhere else.
"""

import re
from typing import Sequence, Union

import numpy as np

from .errors import InvalidInputError

BitsLike = Union[str, Sequence[int], np.ndarray]

BIT_DTYPE = np.uint8

_BINARY_PATTERN = re.compile(r"^[01]+$")


def validate_input(text: str) -> bool:
    """Return True if ``text`` is a non-empty string of '0' and '1'."""
    return isinstance(text, str) and bool(_BINARY_PATTERN.match(text))


def parse_bit_string(bits: BitsLike) -> np.ndarray:
    """
    Strictly convert source data to a bit array.

    Args:
        bits: '0'/'1' string, or a sequence of 0/1 integers

    Returns:
        Bit array (N,) with dtype uint8

    Raises:
        InvalidInputError: If the input is empty or holds anything but 0/1
    """
    if isinstance(bits, str):
        if len(bits) == 0:
            raise InvalidInputError("Input must not be empty", value=bits)
        if not validate_input(bits):
            raise InvalidInputError(
                f"Input must contain only '0' and '1', got {bits!r}", value=bits
            )
        return np.frombuffer(bits.encode("ascii"), dtype=BIT_DTYPE) - ord("0")

    try:
        array = np.asarray(bits)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Cannot interpret {type(bits)} as bits: {e}") from e

    if array.ndim != 1:
        raise InvalidInputError(f"Expected a 1-D bit sequence, got shape {array.shape}")
    if array.size == 0:
        raise InvalidInputError("Input must not be empty", value=bits)
    if array.dtype.kind not in "biu" or not np.isin(array, (0, 1)).all():
        raise InvalidInputError(f"Input must contain only 0 and 1, got {bits!r}", value=bits)

    return array.astype(BIT_DTYPE)


def as_bit_array(bits: BitsLike) -> np.ndarray:
    """
    Leniently convert a received word to a fresh bit array.

    Empty input is allowed; every value is reduced to its lowest bit.
    """
    if isinstance(bits, str):
        if len(bits) == 0:
            return np.zeros(0, dtype=BIT_DTYPE)
        return parse_bit_string(bits)

    array = np.asarray(bits).reshape(-1)
    if array.size == 0:
        return np.zeros(0, dtype=BIT_DTYPE)
    return array.astype(np.int64).astype(BIT_DTYPE) & 1


def bits_to_string(bits: BitsLike) -> str:
    """Render a bit array as a '0'/'1' string."""
    return "".join(str(int(b)) for b in as_bit_array(bits))


def position_to_index(position: int) -> int:
    """Translate a 1-indexed position to an array index."""
    return position - 1


def flip_position(bits: np.ndarray, position: int) -> np.ndarray:
    """
    Return a copy of ``bits`` with the given 1-indexed position inverted.

    The caller is responsible for range checking.
    """
    flipped = np.array(bits, dtype=BIT_DTYPE, copy=True)
    index = position_to_index(position)
    flipped[index] ^= 1
    return flipped


def freeze(bits: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it."""
    bits.flags.writeable = False
    return bits
