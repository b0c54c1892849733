# file: src/module1_hamming_codec/__init__.py

"""
Module 1: Hamming Codec

Single-error-correcting Hamming encoding and syndrome decoding over
arbitrary-length bit strings. Parity bits sit at power-of-two positions
(1, 2, 4, 8, ...), data bits fill the remaining positions in order.

Codewords are 1-D numpy uint8 arrays stored 0-indexed; every function that
takes a *position* expects it 1-indexed.

Public API:
    - encode(bits) -> codeword
    - syndrome(received) -> syndrome
    - position_from_syndrome(syndrome) -> int
    - correct_bit(received, position) -> codeword
    - is_parity_position(n) -> bool
    - parity_count(data_length) -> int
    - decode(received) -> DecodeResult
"""

from .encoder import (
    encode,
    parity_count,
    is_parity_position,
    parity_positions,
    data_positions,
    coverage,
)
from .decoder import (
    syndrome,
    position_from_syndrome,
    correct_bit,
    extract_data,
    decode,
    DecodeResult,
)
from .bit_utils import validate_input, as_bit_array, bits_to_string
from .metrics import EncodingInfo, encoding_info, hamming_distance, compute_ber
from .errors import HammingCodeError, InvalidInputError

__version__ = "1.0.0"

__all__ = [
    "encode",
    "parity_count",
    "is_parity_position",
    "parity_positions",
    "data_positions",
    "coverage",
    "syndrome",
    "position_from_syndrome",
    "correct_bit",
    "extract_data",
    "decode",
    "DecodeResult",
    "validate_input",
    "as_bit_array",
    "bits_to_string",
    "EncodingInfo",
    "encoding_info",
    "hamming_distance",
    "compute_ber",
    "HammingCodeError",
    "InvalidInputError",
]
