"""Attribute derivation engine.

- graph: generic rule graph resolver
- decoder: positional letters and preference predicates
- dynamics: function stack and rational/irrational split
- temperament: temperament classifier
- profile: the assembled type graph and derive_profile()
"""

from .graph import AttributeProfile, Rule, RuleGraph, rule
from .decoder import validate_type_code
from .temperament import classify_temperament
from .profile import TYPE_GRAPH, derive_profile

__all__ = [
    "AttributeProfile",
    "Rule",
    "RuleGraph",
    "rule",
    "validate_type_code",
    "classify_temperament",
    "TYPE_GRAPH",
    "derive_profile",
]
