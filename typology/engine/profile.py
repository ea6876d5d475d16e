"""Profile derivation: the type rule graph and its public entry point."""

import logging
from typing import Iterable

from ..config import get_config
from .decoder import DECODER_RULES, validate_type_code
from .dynamics import DYNAMICS_RULES
from .graph import AttributeProfile, ResolutionMode, RuleGraph
from .temperament import temperament

logger = logging.getLogger(__name__)

# Built once at import; construction fails fast on a cyclic or dangling rule.
TYPE_GRAPH = RuleGraph(
    [*DECODER_RULES, *DYNAMICS_RULES, temperament],
    inputs=("code",),
)


def derive_profile(
    code: str,
    *,
    mode: ResolutionMode | None = None,
    select: Iterable[str] | None = None,
) -> AttributeProfile:
    """
    Derive the attribute profile for a four-letter type code.

    Args:
        code: Type code such as "INTP"
        mode: "eager" or "lazy"; defaults to the configured resolver mode
        select: Attribute names to return (default: every attribute), or a
            single name

    Returns:
        AttributeProfile mapping attribute names to derived values

    Raises:
        InvalidTypeCodeError: If ``code`` is not one of the 16 type codes
        DerivationError: If a rule produces an inconsistent value

    Example:
        >>> profile = derive_profile("ESTJ")
        >>> profile["dominant"].notation, profile["inferior"].notation
        ('Te', 'Fi')
    """
    code = validate_type_code(code)
    resolved_mode = mode or get_config().resolver.mode
    logger.debug("Deriving profile for %s (%s)", code, resolved_mode)
    return TYPE_GRAPH.resolve({"code": code}, mode=resolved_mode, select=select)
