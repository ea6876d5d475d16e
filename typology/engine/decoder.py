"""Code decoder: positional letters and preference predicates.

A type code is four letters, one per dichotomy in fixed order:
attitude (E/I), perception (S/N), judgment (T/F), lifestyle (J/P).
"""

import logging

from ..core.dichotomies import POSITIONS
from ..core.errors import InvalidTypeCodeError
from .graph import rule

logger = logging.getLogger(__name__)

_POSITION_NAMES = ("attitude", "perceiving", "judging", "lifestyle")


def validate_type_code(code: object) -> str:
    """Check that ``code`` is one of the 16 type codes and return it.

    Input is taken as-is: no case folding, no whitespace stripping.

    Raises:
        InvalidTypeCodeError: If ``code`` is not a 4-letter string with a
            valid letter at every position.
    """
    if not isinstance(code, str):
        raise InvalidTypeCodeError(code, f"expected str, got {type(code).__name__}")
    if len(code) != 4:
        raise InvalidTypeCodeError(code, f"expected 4 letters, got {len(code)}")

    for index, (letter, pair) in enumerate(zip(code, POSITIONS)):
        if letter not in pair:
            logger.debug("Rejected type code %r at position %d", code, index)
            raise InvalidTypeCodeError(
                code,
                f"{_POSITION_NAMES[index]} letter at position {index} must be "
                f"{pair[0]} or {pair[1]}, got {letter!r}",
            )
    return code


# =============================================================================
# Positional letters
# =============================================================================


@rule()
def attitude(code):
    """The attitude preference (E-I): whether the extraverted function is
    dominant or auxiliary."""
    return code[0]


@rule()
def perceiving_letter(code):
    """How information is taken in (S-N), the irrational function."""
    return code[1]


@rule()
def judging_letter(code):
    """How decisions are made (T-F), the rational function."""
    return code[2]


@rule()
def lifestyle(code):
    """The lifestyle preference (J-P): whether the judging or the perceiving
    function is most evident in the outside world."""
    return code[3]


# =============================================================================
# Preference predicates
# =============================================================================

# Where attention is focused and energy comes from.
@rule()
def is_introvert(attitude):
    return attitude == "I"


@rule()
def is_extravert(attitude):
    return attitude == "E"


# How information is perceived.
@rule()
def is_sensing(perceiving_letter):
    return perceiving_letter == "S"


@rule()
def is_intuitive(perceiving_letter):
    return perceiving_letter == "N"


# How decisions are made.
@rule()
def is_thinking(judging_letter):
    return judging_letter == "T"


@rule()
def is_feeling(judging_letter):
    return judging_letter == "F"


# Orientation to the external world.
@rule()
def is_perceiving_lifestyle(lifestyle):
    return lifestyle == "P"


@rule()
def is_judging_lifestyle(lifestyle):
    return lifestyle == "J"


DECODER_RULES = (
    attitude,
    perceiving_letter,
    judging_letter,
    lifestyle,
    is_introvert,
    is_extravert,
    is_sensing,
    is_intuitive,
    is_thinking,
    is_feeling,
    is_perceiving_lifestyle,
    is_judging_lifestyle,
)
