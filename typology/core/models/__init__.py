"""Pydantic models for typology."""

from .dynamics import (
    AttitudeFunction,
    AttitudeLetter,
    FunctionLetter,
    FunctionStack,
    Ratio,
    Temperament,
)

__all__ = [
    "AttitudeFunction",
    "AttitudeLetter",
    "FunctionLetter",
    "FunctionStack",
    "Ratio",
    "Temperament",
]
