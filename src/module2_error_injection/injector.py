# file: src/module2_error_injection/injector.py

"""
Deterministic bit-flip error injection.

Flips 1, 2 or 3 bits of a codeword at given or randomly chosen positions
to exercise the single-error guarantee of a Hamming code and to show how it
breaks down under multiple errors. This is not a channel model: the number
of flipped bits is exactly the one requested.

Positions are 1-indexed. The caller's codeword is never modified; every
function works on a copy.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

import numpy as np

from .errors import CodewordTooShortError, InvalidPositionError, UnknownModeError
from .random_source import RandomSource, make_random_source

logger = logging.getLogger(__name__)


class ErrorMode(enum.Enum):
    """Number of simultaneous bit errors to inject."""
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"

    @property
    def flips(self) -> int:
        return _FLIPS[self]

    @classmethod
    def parse(cls, mode: Union["ErrorMode", str]) -> "ErrorMode":
        """
        Accept an ErrorMode or its string value (case-insensitive).

        Raises:
            UnknownModeError: For anything else
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.strip().lower())
            except ValueError:
                pass
        raise UnknownModeError(
            f"Unknown error mode: {mode!r} (expected one of "
            f"{', '.join(m.value for m in cls)})"
        )


_FLIPS = {ErrorMode.SINGLE: 1, ErrorMode.DOUBLE: 2, ErrorMode.TRIPLE: 3}


@dataclass
class InjectionResult:
    """
    Received word plus the ground-truth positions that were flipped.

    Attributes:
        received: Copy of the codeword with the flips applied
        positions: 1-indexed positions flipped, in the order chosen
        mode: Injection mode, None for a manual flip
    """
    received: np.ndarray
    positions: List[int]
    mode: Optional[ErrorMode] = None

    @property
    def count(self) -> int:
        return len(self.positions)


@dataclass
class ErrorInfo:
    """Summary of the errors currently applied by an ErrorInjector."""
    count: int
    positions: List[int] = field(default_factory=list)
    description: str = "No errors"
    can_correct: bool = True
    mode: ErrorMode = ErrorMode.SINGLE


def _copy_bits(codeword: Sequence[int]) -> np.ndarray:
    if isinstance(codeword, str):
        codeword = [int(c) for c in codeword]
    return np.array(codeword, dtype=np.uint8, copy=True).reshape(-1)


def _flip(received: np.ndarray, positions: Sequence[int]) -> np.ndarray:
    for pos in positions:
        received[pos - 1] ^= 1
    return received


def _require_length(length: int, flips: int) -> None:
    if length < flips:
        raise CodewordTooShortError(
            f"At least {flips} bit(s) are needed to inject {flips} error(s), "
            f"codeword has {length}"
        )


def apply_single(
    codeword: Sequence[int],
    rng: Union[None, int, RandomSource] = None
) -> InjectionResult:
    """
    Flip one uniformly chosen bit.

    Args:
        codeword: Codeword to corrupt (left untouched)
        rng: RandomSource, integer seed, or None for fresh entropy

    Returns:
        InjectionResult with one ground-truth position

    Raises:
        CodewordTooShortError: If the codeword is empty
    """
    received = _copy_bits(codeword)
    _require_length(len(received), 1)
    source = make_random_source(rng)

    position = source.randint(1, len(received))
    _flip(received, [position])

    logger.debug("Injected single error at position %d", position)
    return InjectionResult(received, [position], ErrorMode.SINGLE)


def apply_double(
    codeword: Sequence[int],
    rng: Union[None, int, RandomSource] = None
) -> InjectionResult:
    """
    Flip two distinct uniformly chosen bits.

    The second position is resampled until it differs from the first.

    Raises:
        CodewordTooShortError: If the codeword has fewer than 2 bits
    """
    received = _copy_bits(codeword)
    _require_length(len(received), 2)
    source = make_random_source(rng)

    first = source.randint(1, len(received))
    second = source.randint(1, len(received))
    while second == first:
        second = source.randint(1, len(received))

    positions = [first, second]
    _flip(received, positions)

    logger.warning(
        "Injected two errors at positions %d and %d; "
        "a single-error-correcting code will mis-correct", first, second
    )
    return InjectionResult(received, positions, ErrorMode.DOUBLE)


def apply_triple(
    codeword: Sequence[int],
    rng: Union[None, int, RandomSource] = None
) -> InjectionResult:
    """
    Flip three distinct uniformly chosen bits.

    Positions are rejection-sampled until three distinct ones are collected;
    they are reported in the order they were first drawn.

    Raises:
        CodewordTooShortError: If the codeword has fewer than 3 bits
    """
    received = _copy_bits(codeword)
    _require_length(len(received), 3)
    source = make_random_source(rng)

    # dict keeps insertion order
    chosen = {}
    while len(chosen) < 3:
        chosen[source.randint(1, len(received))] = None

    positions = list(chosen)
    _flip(received, positions)

    logger.warning(
        "Injected three errors at positions %s; correction will be wrong",
        ", ".join(map(str, positions))
    )
    return InjectionResult(received, positions, ErrorMode.TRIPLE)


def apply_manual(codeword: Sequence[int], position: int) -> InjectionResult:
    """
    Flip exactly the bit at ``position``.

    Raises:
        InvalidPositionError: If position is outside [1, len(codeword)]
    """
    received = _copy_bits(codeword)

    if isinstance(position, bool) or not isinstance(position, (int, np.integer)):
        raise InvalidPositionError(
            f"Position must be an integer, got {type(position).__name__}",
            position=position, length=len(received)
        )
    if position < 1 or position > len(received):
        raise InvalidPositionError(
            f"Invalid error position {position}: must be in [1, {len(received)}]",
            position=position, length=len(received)
        )

    position = int(position)
    _flip(received, [position])

    logger.debug("Applied manual error at position %d", position)
    return InjectionResult(received, [position], None)


_DISPATCH = {
    ErrorMode.SINGLE: apply_single,
    ErrorMode.DOUBLE: apply_double,
    ErrorMode.TRIPLE: apply_triple,
}


def apply_errors(
    codeword: Sequence[int],
    mode: Union[ErrorMode, str],
    rng: Union[None, int, RandomSource] = None
) -> InjectionResult:
    """
    Inject errors according to ``mode``.

    Args:
        codeword: Codeword to corrupt (left untouched)
        mode: ErrorMode or one of 'single', 'double', 'triple'
        rng: RandomSource, integer seed, or None

    Returns:
        InjectionResult with the received word and ground-truth positions

    Raises:
        UnknownModeError: If mode is not recognised
        CodewordTooShortError: If the codeword is too short for the mode
    """
    return _DISPATCH[ErrorMode.parse(mode)](codeword, rng)


inject_errors = apply_errors


def inject_manual(codeword: Sequence[int], position: int) -> np.ndarray:
    """Flip one bit at ``position`` and return only the received word."""
    return apply_manual(codeword, position).received


class ErrorInjector:
    """
    Stateful wrapper remembering the last ground-truth error positions.

    The recorded positions are only used to comment on whether a later
    correction could have succeeded; the injector holds no codeword.

    Args:
        mode: Initial injection mode
        rng: RandomSource or integer seed shared by all injections
    """

    def __init__(
        self,
        mode: Union[ErrorMode, str] = ErrorMode.SINGLE,
        rng: Union[None, int, RandomSource] = None
    ):
        self.mode = ErrorMode.parse(mode)
        self.rng = make_random_source(rng)
        self._positions: List[int] = []

    def set_mode(self, mode: Union[ErrorMode, str]) -> None:
        """Change the injection mode and forget previous errors."""
        self.mode = ErrorMode.parse(mode)
        self._positions = []

    def simulate(self, codeword: Sequence[int]) -> InjectionResult:
        """Inject errors into ``codeword`` using the current mode."""
        result = apply_errors(codeword, self.mode, self.rng)
        self._positions = list(result.positions)
        return result

    def simulate_manual(self, codeword: Sequence[int], position: int) -> InjectionResult:
        """Flip one chosen bit of ``codeword`` and record it."""
        result = apply_manual(codeword, position)
        self._positions = list(result.positions)
        return result

    def record(self, positions: Sequence[int]) -> None:
        """Replace the recorded ground truth."""
        self._positions = [int(p) for p in positions]

    def reset(self) -> None:
        self._positions = []

    @property
    def error_positions(self) -> List[int]:
        return list(self._positions)

    def has_errors(self) -> bool:
        return len(self._positions) > 0

    def error_info(self) -> ErrorInfo:
        """Describe the recorded errors and whether one Hamming step can fix them."""
        count = len(self._positions)

        if count == 0:
            return ErrorInfo(count=0, mode=self.mode)

        return ErrorInfo(
            count=count,
            positions=list(self._positions),
            description="Single error" if count == 1 else f"{count} multiple errors",
            can_correct=count == 1,
            mode=self.mode,
        )
