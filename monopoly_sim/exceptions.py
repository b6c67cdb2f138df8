"""
Custom exception hierarchy for the simulation engine.

Domain outcomes such as a failed purchase or an undecided game are return
values, not errors. These types cover misuse and states the engine refuses
to continue from.
"""


class SimulationError(Exception):
    """Base exception for all simulation errors."""


class StalledRotationError(SimulationError):
    """A new rotation round started with no active players left to move."""


class ConfigurationError(SimulationError):
    """Numeric configuration is outside its valid range."""


class UnknownBehaviorError(SimulationError):
    """Requested buy behavior is not one of the known variants."""
