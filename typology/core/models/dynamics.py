"""Type dynamics models: attitude-function pairs, function stacks, labels.

All models are frozen; a derived profile never changes after resolution.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator


FunctionLetter = Literal["S", "N", "T", "F"]
AttitudeLetter = Literal["E", "I"]


# =============================================================================
# Labels
# =============================================================================


class Ratio(str, Enum):
    """Whether the extraverted function is a judging or perceiving one."""

    RATIONAL = "rational"
    IRRATIONAL = "irrational"


class Temperament(str, Enum):
    """Four-way temperament grouping."""

    GUARDIAN = "Guardian"
    ARTISAN = "Artisan"
    IDEALIST = "Idealist"
    RATIONAL = "Rational"


# =============================================================================
# Function stack
# =============================================================================


class AttitudeFunction(BaseModel, frozen=True):
    """A cognitive function paired with the attitude it operates in.

    ``resolved`` is False for the tertiary position, whose attitude is
    carried as the raw attitude letter of the code rather than worked out
    from the rest of the stack. Unresolved pairs render as the bare
    function letter ("F", not "Fe" or "Fi").
    """

    function: FunctionLetter = Field(description="Cognitive function letter")
    attitude: AttitudeLetter = Field(description="Attitude letter (E or I)")
    resolved: bool = Field(
        default=True, description="Whether the attitude is part of the pairing"
    )

    @property
    def notation(self) -> str:
        """Conventional short form, e.g. "Te" or "Ni"."""
        if not self.resolved:
            return self.function
        return f"{self.function}{self.attitude.lower()}"

    @property
    def is_extraverted(self) -> bool:
        return self.attitude == "E"

    @property
    def is_introverted(self) -> bool:
        return self.attitude == "I"

    def __str__(self) -> str:
        return self.notation


class FunctionStack(BaseModel, frozen=True):
    """Dominant, auxiliary, tertiary and inferior functions in order."""

    dominant: AttitudeFunction
    auxiliary: AttitudeFunction
    tertiary: AttitudeFunction
    inferior: AttitudeFunction

    @model_validator(mode="after")
    def _each_function_once(self) -> "FunctionStack":
        letters = [entry.function for entry in self.entries()]
        if sorted(letters) != sorted("SNTF"):
            raise ValueError(
                f"Function stack must use S, N, T and F exactly once, got {letters}"
            )
        return self

    def entries(self) -> tuple[AttitudeFunction, ...]:
        """The four entries in stack order."""
        return (self.dominant, self.auxiliary, self.tertiary, self.inferior)

    @property
    def notation(self) -> list[str]:
        return [entry.notation for entry in self.entries()]
