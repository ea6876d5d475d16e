"""Dependency graph helpers: topological sort and cycle detection."""

from collections import defaultdict

from ..core.errors import CyclicRuleGraphError


def topological_sort(deps: dict[str, list[str]]) -> list[str]:
    """
    Topological sort of named nodes based on their dependencies.

    Uses Kahn's algorithm to determine an evaluation order where every
    node comes after the nodes it depends on. Dependencies on names that
    are not keys of ``deps`` (external inputs) are ignored.

    Args:
        deps: Mapping of node name -> names it depends on

    Returns:
        List of node names in evaluation order

    Raises:
        CyclicRuleGraphError: If circular dependencies exist
    """
    # Build adjacency list and in-degree count
    graph = defaultdict(list)  # node -> list of nodes that depend on it
    in_degree = {name: 0 for name in deps}

    for name, requires in deps.items():
        for dep in requires:
            if dep in in_degree:
                graph[dep].append(name)
                in_degree[name] += 1

    # Start with nodes that have no dependencies
    queue = [name for name, degree in in_degree.items() if degree == 0]
    order = []

    while queue:
        # Sort for deterministic ordering
        queue.sort()
        node = queue.pop(0)
        order.append(node)

        for dependent in graph[node]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    if len(order) != len(deps):
        remaining = sorted(name for name in deps if name not in order)
        raise CyclicRuleGraphError(remaining)

    return order


def transitive_dependencies(deps: dict[str, list[str]], name: str) -> set[str]:
    """Return every node ``name`` depends on, directly or indirectly.

    External inputs (names that are not keys of ``deps``) are included.
    """
    seen: set[str] = set()
    stack = list(deps.get(name, []))
    while stack:
        dep = stack.pop()
        if dep in seen:
            continue
        seen.add(dep)
        stack.extend(deps.get(dep, []))
    return seen
