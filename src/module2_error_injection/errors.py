# file: src/module2_error_injection/errors.py
"""
Error injection exception types for Module 2.
"""


class ErrorInjectionError(Exception):
    """Base exception for Module 2 error injection."""
    pass


class InvalidPositionError(ErrorInjectionError):
    """Raised when a manual flip position lies outside [1, length]."""

    def __init__(self, message: str, position: int = None, length: int = None):
        super().__init__(message)
        self.position = position
        self.length = length


class UnknownModeError(ErrorInjectionError):
    """Raised when an injection mode is not single, double or triple."""
    pass


class CodewordTooShortError(ErrorInjectionError):
    """Raised when a codeword has fewer bits than the flips requested."""
    pass
