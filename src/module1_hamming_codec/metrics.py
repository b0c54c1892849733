# file: src/module1_hamming_codec/metrics.py

"""
Hamming code metrics.

Provides code-rate information for an encoded word and bit-level
comparison between two codewords.
"""

from dataclasses import dataclass

import numpy as np

from .bit_utils import BitsLike, as_bit_array


@dataclass(frozen=True)
class EncodingInfo:
    """Size and efficiency figures for one encoding."""
    data_bits: int
    parity_bits: int
    total_bits: int
    efficiency: float

    def describe(self) -> str:
        return (
            f"{self.data_bits} bits -> {self.total_bits} bits "
            f"({self.efficiency:.1f}% efficiency, {self.parity_bits} parity bits)"
        )


def encoding_info(data: BitsLike, codeword: BitsLike) -> EncodingInfo:
    """
    Compute encoding statistics.

    Efficiency = data_bits / total_bits * 100

    Args:
        data: Original source bits
        codeword: Encoded codeword

    Returns:
        EncodingInfo

    Example:
        >>> info = encoding_info("1011", encode("1011"))
        >>> info.parity_bits, round(info.efficiency, 1)
        (3, 57.1)
    """
    data_bits = len(as_bit_array(data))
    total_bits = len(as_bit_array(codeword))

    if total_bits < data_bits:
        raise ValueError(
            f"codeword length {total_bits} < data length {data_bits}"
        )

    efficiency = data_bits / total_bits * 100.0 if total_bits else 0.0

    return EncodingInfo(
        data_bits=data_bits,
        parity_bits=total_bits - data_bits,
        total_bits=total_bits,
        efficiency=efficiency,
    )


def hamming_distance(a: BitsLike, b: BitsLike) -> int:
    """
    Number of positions at which two codewords differ.

    Raises:
        ValueError: If the codewords have different lengths
    """
    bits_a = as_bit_array(a)
    bits_b = as_bit_array(b)

    if len(bits_a) != len(bits_b):
        raise ValueError(
            f"Length mismatch: a={len(bits_a)}, b={len(bits_b)}"
        )

    return int(np.count_nonzero(bits_a != bits_b))


def compute_ber(original: BitsLike, received: BitsLike) -> float:
    """
    Bit Error Rate between two codewords.

    BER = (number of differing bits) / (total number of bits)

    Returns:
        BER in [0.0, 1.0]; 0.0 for empty words
    """
    errors = hamming_distance(original, received)
    total = len(as_bit_array(original))
    if total == 0:
        return 0.0
    return errors / total
