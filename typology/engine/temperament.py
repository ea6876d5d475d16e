"""Temperament classifier: four groups from two letters of the code."""

from ..core.models import Temperament
from .decoder import validate_type_code
from .graph import rule


def classify_temperament(code: str) -> Temperament:
    """Classify a type code into its temperament.

    SJ -> Guardian, SP -> Artisan, NF -> Idealist, NT -> Rational.

    Raises:
        InvalidTypeCodeError: If ``code`` is not a valid type code.
    """
    code = validate_type_code(code)
    return _match(code[1], code[2], code[3])


def _match(perceiving: str, judging: str, lifestyle: str) -> Temperament:
    if perceiving == "S":
        return Temperament.GUARDIAN if lifestyle == "J" else Temperament.ARTISAN
    return Temperament.IDEALIST if judging == "F" else Temperament.RATIONAL


@rule()
def temperament(perceiving_letter, judging_letter, lifestyle):
    return _match(perceiving_letter, judging_letter, lifestyle)
