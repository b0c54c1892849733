# file: src/module1_hamming_codec/errors.py

"""
Hamming codec exception hierarchy.

All exceptions inherit from HammingCodeError for unified handling.
"""


class HammingCodeError(Exception):
    """Base exception for all Hamming codec errors."""
    pass


class InvalidInputError(HammingCodeError):
    """Raised when source data is empty or contains non-binary symbols."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value
