"""The four dichotomies and their opposite-letter table.

A bipartition: every preference belongs to exactly one letter of its pair.
The letters carry technical meanings that differ from everyday usage; a
J preference does not mean "judgmental", it names which kind of function
is shown to the outer world.
"""

from itertools import product
from types import MappingProxyType

# Extraversion (E) - (I) Introversion: the attitude a function operates in.
# Sensing (S) - (N) Intuition: the "irrational" (perceiving) functions.
# Thinking (T) - (F) Feeling: the "rational" (judging) functions.
# Judging (J) - (P) Perceiving: which function is extraverted.
DICHOTOMIES = MappingProxyType(
    {
        "E": "I",
        "I": "E",
        "S": "N",
        "N": "S",
        "T": "F",
        "F": "T",
        "J": "P",
        "P": "J",
    }
)

# Letter pairs in code position order.
POSITIONS: tuple[tuple[str, str], ...] = (
    ("E", "I"),
    ("S", "N"),
    ("T", "F"),
    ("J", "P"),
)

ATTITUDES = frozenset(POSITIONS[0])
PERCEIVING_FUNCTIONS = frozenset(POSITIONS[1])
JUDGING_FUNCTIONS = frozenset(POSITIONS[2])
FUNCTIONS = PERCEIVING_FUNCTIONS | JUDGING_FUNCTIONS


def opposite(letter: str) -> str:
    """Return the other letter of the dichotomy ``letter`` belongs to.

    Raises:
        KeyError: If ``letter`` is not one of the eight dichotomy letters.
    """
    return DICHOTOMIES[letter]


def all_type_codes() -> list[str]:
    """Return the 16 type codes, ordered I/E x S/N x F/T x P/J."""
    return [
        "".join(letters)
        for letters in product("IE", "SN", "FT", "PJ")
    ]
