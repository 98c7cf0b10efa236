"""
Exceptions raised by libplanets.
"""


class LibPlanetsError(Exception):
    """Base class for libplanets errors."""


class ContractViolation(LibPlanetsError, TypeError):
    """
    A body variant does not supply the operations the pipeline needs.

    Raised when the variant is constructed or registered, before any
    position is computed.
    """
