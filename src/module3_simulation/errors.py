"""
Custom exceptions for Module 3: Transmission Simulation.
"""


class SimulationError(Exception):
    """Base exception for simulation session and configuration errors."""
    pass


class NoDataError(SimulationError):
    """Raised when an operation needs encoded data and none is loaded."""
    pass


class ConfigurationError(SimulationError):
    """
    Raised when configuration cannot be loaded or is invalid.

    This includes:
    - Missing configuration file
    - Malformed YAML
    - Wrong value types or out-of-range limits
    """
    pass
