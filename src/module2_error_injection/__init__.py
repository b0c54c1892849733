"""
Module 2: Error Injection

Flips 1, 2 or 3 bits of a codeword, at random or at a chosen position, to
demonstrate single-error correction and its failure under multiple errors.
Works on copies only and does not depend on the codec.

Public Interface:
    - apply_errors / inject_errors: mode-dispatched random injection
    - apply_single, apply_double, apply_triple, apply_manual
    - inject_manual: manual flip returning only the received word
    - ErrorInjector: keeps the last ground-truth positions
    - ErrorMode, InjectionResult, ErrorInfo
    - RandomSource, NumpyRandomSource, make_random_source

Example usage:
    >>> from src.module2_error_injection import apply_errors, ErrorMode
    >>> result = apply_errors([0, 1, 1, 0, 0, 1, 1], ErrorMode.DOUBLE, rng=7)
    >>> result.positions
"""

from .injector import (
    ErrorMode,
    InjectionResult,
    ErrorInfo,
    ErrorInjector,
    apply_single,
    apply_double,
    apply_triple,
    apply_manual,
    apply_errors,
    inject_errors,
    inject_manual,
)
from .random_source import RandomSource, NumpyRandomSource, make_random_source
from .errors import (
    ErrorInjectionError,
    InvalidPositionError,
    UnknownModeError,
    CodewordTooShortError,
)

__all__ = [
    "ErrorMode",
    "InjectionResult",
    "ErrorInfo",
    "ErrorInjector",
    "apply_single",
    "apply_double",
    "apply_triple",
    "apply_manual",
    "apply_errors",
    "inject_errors",
    "inject_manual",
    "RandomSource",
    "NumpyRandomSource",
    "make_random_source",
    "ErrorInjectionError",
    "InvalidPositionError",
    "UnknownModeError",
    "CodewordTooShortError",
]

__version__ = "1.0.0"
