# file: src/module1_hamming_codec/encoder.py

"""
Hamming encoding.

Places data bits at the non-power-of-two positions of the codeword and
computes an even-parity bit for every power-of-two position.
"""

import logging
from typing import List

import numpy as np

from .bit_utils import BIT_DTYPE, BitsLike, freeze, parse_bit_string
from .errors import InvalidInputError

logger = logging.getLogger(__name__)


def is_parity_position(n: int) -> bool:
    """Return True if the 1-indexed position ``n`` holds a parity bit."""
    return n > 0 and (n & (n - 1)) == 0


def parity_count(data_length: int) -> int:
    """
    Number of parity bits needed to protect ``data_length`` data bits.

    Smallest r such that 2^r >= data_length + r + 1.

    Args:
        data_length: Number of data bits (>= 0)

    Returns:
        Parity bit count r

    Raises:
        InvalidInputError: If data_length is negative

    Example:
        >>> parity_count(4)
        3
        >>> parity_count(11)
        4
    """
    if data_length < 0:
        raise InvalidInputError(f"data_length must be >= 0, got {data_length}")

    r = 0
    while (1 << r) < data_length + r + 1:
        r += 1
    return r


def parity_positions(length: int) -> List[int]:
    """1-indexed parity positions of a codeword of the given length."""
    return [p for p in range(1, length + 1) if is_parity_position(p)]


def data_positions(length: int) -> List[int]:
    """1-indexed data positions of a codeword of the given length."""
    return [p for p in range(1, length + 1) if not is_parity_position(p)]


def coverage(parity_pos: int, length: int) -> List[int]:
    """
    Positions checked by the parity bit at ``parity_pos``.

    Includes ``parity_pos`` itself.
    """
    return [j for j in range(1, length + 1) if j & parity_pos]


def encode(bits: BitsLike) -> np.ndarray:
    """
    Encode source bits into a Hamming codeword.

    Parity bits are computed in ascending position order. Each pass XORs the
    current value of every covered position, so parity bits already written
    are read back and those not yet written count as 0.

    Args:
        bits: Source data as a '0'/'1' string (or sequence of 0/1 ints)

    Returns:
        Read-only codeword array (N + r,), 0-indexed: index k holds
        position k + 1

    Raises:
        InvalidInputError: If the input is empty or not binary

    Example:
        >>> encode("1011").tolist()
        [0, 1, 1, 0, 0, 1, 1]
    """
    data = parse_bit_string(bits)

    r = parity_count(len(data))
    total_length = len(data) + r

    # Slot 0 is unused so that array index == position
    work = np.zeros(total_length + 1, dtype=BIT_DTYPE)
    positions = np.arange(total_length + 1)

    is_data = np.array([p > 0 and not is_parity_position(p) for p in positions])
    work[is_data] = data

    for i in range(r):
        parity_pos = 1 << i
        covered = (positions & parity_pos) != 0
        work[parity_pos] = np.bitwise_xor.reduce(work[covered])

    codeword = work[1:].copy()

    logger.debug(
        "Encoded %d data bits with %d parity bits: %s",
        len(data), r, "".join(map(str, codeword.tolist()))
    )

    return freeze(codeword)
