"""Pure utility functions for typology.

Foundational helpers with no dependencies on the engine, importable from
anywhere without circular import risk.

Modules:
- graphs: Topological sort and cycle detection
"""

from .graphs import topological_sort, transitive_dependencies
from ..core.errors import CyclicRuleGraphError

__all__ = [
    "topological_sort",
    "transitive_dependencies",
    "CyclicRuleGraphError",
]
