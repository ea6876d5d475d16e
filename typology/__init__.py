"""Typology: type-dynamics derivation for four-letter personality type codes.

Example:
    from typology import derive_profile

    profile = derive_profile("ESTJ")
    profile["dominant"].notation   # "Te"
    profile["temperament"]         # Temperament.GUARDIAN
"""

__version__ = "0.1.0"

from .core.errors import (  # noqa: E402
    TypologyError,
    InvalidTypeCodeError,
    RuleGraphError,
    CyclicRuleGraphError,
    DerivationError,
)
from .engine.profile import AttributeProfile, TYPE_GRAPH, derive_profile  # noqa: E402

__all__ = [
    "__version__",
    "derive_profile",
    "AttributeProfile",
    "TYPE_GRAPH",
    "TypologyError",
    "InvalidTypeCodeError",
    "RuleGraphError",
    "CyclicRuleGraphError",
    "DerivationError",
]
