class InvariantViolation(AssertionError):
    """The stored ranges and the engine's bookkeeping disagree.

    Raised only for states a correct engine never produces; it signals a
    defect, not bad input, and is never swallowed.
    """


class RegistryFullError(RuntimeError):
    """No more named range lists may be created."""
