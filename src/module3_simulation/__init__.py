"""
Module 3: Transmission Simulation

Front-end glue around the codec (Module 1) and the error injector
(Module 2): a session object holding the encoded, transmitted and corrected
words, YAML configuration, and the ``hamming-sim`` command line.

Public Interface:
    - TransmissionSession: encode -> inject -> detect -> correct
    - CorrectionStatus, CorrectionOutcome
    - load_config, setup_logging
    - SimulationError, NoDataError, ConfigurationError

Example usage:
    >>> from src.module3_simulation import TransmissionSession
    >>> session = TransmissionSession(rng=42)
    >>> session.encode("1011")
    >>> session.simulate_error("double")
    >>> outcome = session.correct()
    >>> outcome.status
"""

from .session import TransmissionSession, CorrectionStatus, CorrectionOutcome
from .config import load_config, setup_logging, DEFAULT_CONFIG_PATH
from .errors import SimulationError, NoDataError, ConfigurationError

__all__ = [
    "TransmissionSession",
    "CorrectionStatus",
    "CorrectionOutcome",
    "load_config",
    "setup_logging",
    "DEFAULT_CONFIG_PATH",
    "SimulationError",
    "NoDataError",
    "ConfigurationError",
]

__version__ = "1.0.0"
