# file: src/module1_hamming_codec/decoder.py

"""
Hamming syndrome decoding.

Every function here is total: a received word with more than one flipped
bit still produces a syndrome, a position and a "corrected" word. Those
results are simply wrong, which is exactly what the simulator demonstrates.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .bit_utils import (
    BIT_DTYPE, BitsLike, as_bit_array, bits_to_string, flip_position, position_to_index
)
from .encoder import is_parity_position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of running the full decode pipeline on a received word."""
    data: str
    syndrome: np.ndarray
    error_position: int
    corrected: np.ndarray

    @property
    def error_detected(self) -> bool:
        return self.error_position != 0


def syndrome(received: BitsLike) -> np.ndarray:
    """
    Recompute the parity checks of a received word.

    The number of checks is the smallest r with 2^r >= n + 1, where n is the
    received length. Check i XORs every position j with bit i set.

    Args:
        received: Received codeword (0-indexed storage)

    Returns:
        Syndrome array (r,), one bit per parity check
    """
    word = as_bit_array(received)
    n = len(word)

    r = 0
    while (1 << r) < n + 1:
        r += 1

    positions = np.arange(1, n + 1)
    result = np.zeros(r, dtype=BIT_DTYPE)
    for i in range(r):
        covered = (positions & (1 << i)) != 0
        result[i] = np.bitwise_xor.reduce(word[covered])

    return result


def position_from_syndrome(syndrome_bits: BitsLike) -> int:
    """
    Read a syndrome as a binary number, bit i weighing 2^i.

    Returns:
        0 when no error is detected, otherwise the 1-indexed position the
        syndrome points at (only trustworthy for a single error)
    """
    bits = as_bit_array(syndrome_bits)
    return sum(int(bit) << i for i, bit in enumerate(bits))


def correct_bit(received: BitsLike, position: int) -> np.ndarray:
    """
    Flip the bit at ``position`` in a copy of the received word.

    Position 0, or a position beyond the word, returns an unmodified copy.
    No attempt is made to check that the position is a genuine error.
    """
    word = as_bit_array(received)
    if position <= 0 or position > len(word):
        return word.copy()
    return flip_position(word, position)


def extract_data(codeword: BitsLike) -> str:
    """Read the data bits (non-power-of-two positions) back out of a codeword."""
    word = as_bit_array(codeword)
    return "".join(
        str(int(word[position_to_index(p)]))
        for p in range(1, len(word) + 1)
        if not is_parity_position(p)
    )


def decode(received: BitsLike) -> DecodeResult:
    """
    Run syndrome -> position -> correction -> data extraction.

    Args:
        received: Received codeword

    Returns:
        DecodeResult holding the recovered data string, the syndrome, the
        claimed error position and the corrected codeword
    """
    word = as_bit_array(received)
    syn = syndrome(word)
    position = position_from_syndrome(syn)
    corrected = correct_bit(word, position)

    if position > len(word):
        logger.warning(
            "Syndrome points at position %d beyond word length %d; "
            "more than one bit is corrupted", position, len(word)
        )
    elif position:
        logger.debug("Syndrome %s -> flipping position %d", bits_to_string(syn), position)

    return DecodeResult(
        data=extract_data(corrected),
        syndrome=syn,
        error_position=position,
        corrected=corrected,
    )
