"""
Transmission session.

Drives one encode -> inject -> detect -> correct cycle for a front end
(CLI, notebook, GUI). Holds the state a renderer needs; all coding work is
delegated to the stateless codec and to an ErrorInjector owned by the
session.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import numpy as np

from src.module1_hamming_codec import (
    EncodingInfo,
    InvalidInputError,
    bits_to_string,
    correct_bit,
    encode,
    encoding_info,
    extract_data,
    position_from_syndrome,
    syndrome,
)
from src.module2_error_injection import (
    ErrorInfo,
    ErrorInjector,
    ErrorMode,
    InjectionResult,
    RandomSource,
)

from .config import load_config
from .errors import NoDataError

logger = logging.getLogger(__name__)


class CorrectionStatus(enum.Enum):
    NO_ERROR = "no_error"
    CORRECTED = "corrected"
    MISCORRECTED = "miscorrected"
    UNDETECTED = "undetected"


@dataclass
class CorrectionOutcome:
    """
    Result of applying the syndrome's correction.

    Attributes:
        status: Classification against the originally encoded word
        error_position: Position the syndrome pointed at (0 = none)
        corrected: Received word after the claimed bit was flipped
        injected_positions: Ground-truth positions recorded by the injector
        recovered: Data bits read from the corrected word
    """
    status: CorrectionStatus
    error_position: int
    corrected: np.ndarray
    injected_positions: List[int] = field(default_factory=list)
    recovered: str = ""

    @property
    def successful(self) -> bool:
        return self.status in (CorrectionStatus.NO_ERROR, CorrectionStatus.CORRECTED)


class TransmissionSession:
    """
    State holder for a single simulated transmission.

    Args:
        config: Configuration dictionary (see default_config.yaml); loaded
                from the packaged defaults when None
        rng: RandomSource or integer seed; falls back to
             simulation.random_seed from the config
        injector: Pre-built ErrorInjector, mainly for tests
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        rng: Union[None, int, RandomSource] = None,
        injector: Optional[ErrorInjector] = None
    ):
        self.config = config if config is not None else load_config()

        sim_cfg = self.config.get("simulation", {})
        if rng is None:
            rng = sim_cfg.get("random_seed")

        self.injector = injector or ErrorInjector(
            mode=sim_cfg.get("default_mode", "single"), rng=rng
        )

        hamming_cfg = self.config.get("hamming", {})
        self.min_data_bits = hamming_cfg.get("min_data_bits", 1)
        self.max_data_bits = hamming_cfg.get("max_data_bits", 12)

        self.clear()

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Forget all data and errors."""
        self.original_data = ""
        self.encoded = np.zeros(0, dtype=np.uint8)
        self.transmitted = np.zeros(0, dtype=np.uint8)
        self.syndrome = np.zeros(0, dtype=np.uint8)
        self.error_position = 0
        self.corrected = np.zeros(0, dtype=np.uint8)
        self.injector.reset()

    @property
    def has_data(self) -> bool:
        return len(self.encoded) > 0

    def encode(self, data: str) -> EncodingInfo:
        """
        Validate and encode user data, resetting the transmission.

        Raises:
            InvalidInputError: Empty, non-binary or out-of-range length input
        """
        data = (data or "").strip()

        if not data:
            raise InvalidInputError("Please enter a binary sequence", value=data)
        if len(data) < self.min_data_bits or len(data) > self.max_data_bits:
            raise InvalidInputError(
                f"Data must have between {self.min_data_bits} and "
                f"{self.max_data_bits} bits, got {len(data)}",
                value=data
            )

        codeword = encode(data)

        self.original_data = data
        self.encoded = codeword
        self.reset_transmission()

        info = encoding_info(data, codeword)
        logger.info(f"Encoded {data} -> {bits_to_string(codeword)} ({info.describe()})")
        return info

    def _require_data(self) -> None:
        if not self.has_data:
            raise NoDataError("Encode some data before simulating errors")

    # ------------------------------------------------------------------
    # Error injection
    # ------------------------------------------------------------------

    def set_mode(self, mode: Union[ErrorMode, str]) -> None:
        self.injector.set_mode(mode)

    def simulate_error(self, mode: Union[None, ErrorMode, str] = None) -> InjectionResult:
        """
        Re-transmit the encoded word with fresh random errors.

        Args:
            mode: Overrides the injector's current mode when given
        """
        self._require_data()
        if mode is not None:
            self.injector.set_mode(mode)

        self.corrected = np.zeros(0, dtype=np.uint8)
        result = self.injector.simulate(self.encoded)
        self.transmitted = result.received
        self.detect()
        return result

    def toggle_bit(self, position: int) -> InjectionResult:
        """
        Flip one bit of the current transmitted word.

        The flip is recorded as a manual error at that position.

        Raises:
            NoDataError: If nothing has been encoded
            InvalidPositionError: If position is outside the word
        """
        self._require_data()

        result = self.injector.simulate_manual(self.transmitted, position)
        self.transmitted = result.received
        self.corrected = np.zeros(0, dtype=np.uint8)

        # Ground truth is the full difference from the encoded word
        diff = np.flatnonzero(self.transmitted != self.encoded) + 1
        self.injector.record(diff.tolist())

        self.detect()
        return result

    # ------------------------------------------------------------------
    # Detection and correction
    # ------------------------------------------------------------------

    def detect(self) -> int:
        """Recompute the syndrome of the transmitted word."""
        self.syndrome = syndrome(self.transmitted)
        self.error_position = position_from_syndrome(self.syndrome)
        return self.error_position

    def correct(self) -> CorrectionOutcome:
        """
        Apply the correction the syndrome asks for and classify it.

        Returns:
            CorrectionOutcome; MISCORRECTED when the corrected word differs
            from the encoded one, which happens with two or more errors
        """
        self._require_data()
        self.detect()

        injected = self.injector.error_positions

        if self.error_position == 0:
            self.corrected = np.array(self.transmitted, copy=True)
            if injected:
                logger.warning(
                    f"Syndrome is zero but {len(injected)} error(s) were injected "
                    f"at {injected}; the errors went undetected"
                )
                status = CorrectionStatus.UNDETECTED
            else:
                status = CorrectionStatus.NO_ERROR
        else:
            self.corrected = correct_bit(self.transmitted, self.error_position)
            if np.array_equal(self.corrected, self.encoded):
                status = CorrectionStatus.CORRECTED
                logger.info(f"Error corrected at position {self.error_position}")
            else:
                status = CorrectionStatus.MISCORRECTED
                logger.warning(
                    f"Correction applied at position {self.error_position} but result "
                    f"is WRONG: {len(injected)} errors at {injected}; "
                    f"a Hamming code corrects only 1 error"
                )

        return CorrectionOutcome(
            status=status,
            error_position=self.error_position,
            corrected=self.corrected,
            injected_positions=injected,
            recovered=extract_data(self.corrected),
        )

    def reset_transmission(self) -> None:
        """Restore the transmitted word to the encoded codeword."""
        self.transmitted = np.array(self.encoded, copy=True)
        self.corrected = np.zeros(0, dtype=np.uint8)
        self.syndrome = np.zeros(0, dtype=np.uint8)
        self.error_position = 0
        self.injector.reset()

    def error_info(self) -> ErrorInfo:
        return self.injector.error_info()

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view of the session for renderers."""
        return {
            "original_data": self.original_data,
            "encoded": bits_to_string(self.encoded),
            "transmitted": bits_to_string(self.transmitted),
            "syndrome": bits_to_string(self.syndrome),
            "error_position": self.error_position,
            "corrected": bits_to_string(self.corrected),
            "injected_positions": self.injector.error_positions,
            "mode": self.injector.mode.value,
        }
