"""Custom exceptions raised by the kinetics and photolysis engines."""

from __future__ import annotations

from typing import Any


class DomainError(ValueError):
    """Nonphysical input passed to a rate or photolysis function.

    Raised for non-positive temperature, negative number density, non-positive
    equilibrium constants and malformed interpolation tables. A ``DomainError``
    always indicates a modeling or data-setup bug and is never recovered from.

    Parameters
    ----------
    message : str
        Description of the violated constraint
    function : str, optional
        Name of the function that rejected the input
    **inputs : Any
        Offending input values, keyed by argument name
    """

    def __init__(self, message: str, function: str | None = None, **inputs: Any) -> None:
        self.function = function
        self.inputs = inputs

        if function is not None:
            message = f"{function}: {message}"
        if inputs:
            formatted = ", ".join(f"{k}={v!r}" for k, v in inputs.items())
            message = f"{message} ({formatted})"
        super().__init__(message)


class ReactionRateError(DomainError):
    """A :class:`DomainError` raised while evaluating a named reaction of a mechanism."""

    def __init__(self, reaction: str, error: DomainError) -> None:
        self.reaction = reaction
        super().__init__(f"reaction {reaction!r} failed: {error}")
        self.function = error.function
        self.inputs = error.inputs
