"""Attribute graph resolver.

A RuleGraph is a fixed set of named derivation rules. Each rule declares
the names it requires (other rules or raw inputs) and computes one value
from them. The graph is validated and ordered once, when it is built;
resolving an input then walks that order, computing every needed rule
exactly once and sharing the result with all of its dependents.

Example:
    >>> @rule()
    ... def double(x):
    ...     return x * 2
    >>> @rule()
    ... def quadruple(double):
    ...     return double * 2
    >>> graph = RuleGraph([double, quadruple], inputs=("x",))
    >>> graph.resolve({"x": 3})["quadruple"]
    12
"""

import inspect
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Literal

from pydantic import BaseModel

from ..config import RESOLUTION_MODES
from ..core.errors import DerivationError, RuleGraphError, TypologyError
from ..utils import topological_sort, transitive_dependencies

logger = logging.getLogger(__name__)

ResolutionMode = Literal["eager", "lazy"]


# =============================================================================
# Rules
# =============================================================================


@dataclass(frozen=True)
class Rule:
    """A named pure derivation and the names it depends on."""

    name: str
    requires: tuple[str, ...]
    fn: Callable[..., Any]

    def __call__(self, **kwargs: Any) -> Any:
        return self.fn(**kwargs)


def rule(
    name: str | None = None, *, requires: Iterable[str] | None = None
) -> Callable[[Callable[..., Any]], Rule]:
    """Decorator turning a function into a Rule.

    The rule name defaults to the function name and its dependencies to the
    function's parameter names, so a rule reads like the attributes it uses:

        @rule()
        def is_introvert(attitude):
            return attitude == "I"
    """

    def decorator(fn: Callable[..., Any]) -> Rule:
        if requires is None:
            deps = tuple(inspect.signature(fn).parameters)
        else:
            deps = tuple(requires)
        return Rule(name=name or fn.__name__, requires=deps, fn=fn)

    return decorator


# =============================================================================
# Profile
# =============================================================================


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


class AttributeProfile(Mapping[str, Any]):
    """Read-only mapping of attribute name -> derived value for one input.

    Each profile owns its values; nothing is shared between resolution
    passes, so a profile can be read from any number of threads.
    """

    __slots__ = ("_values", "_code")

    def __init__(self, values: Mapping[str, Any], code: str | None = None):
        self._values = dict(values)
        self._code = code

    @property
    def code(self) -> str | None:
        """The type code this profile was derived from."""
        return self._code

    @property
    def stack(self) -> Any:
        """The function stack, when it was resolved."""
        return self._values["function_stack"]

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"AttributeProfile(code={self._code!r}, "
            f"attributes={sorted(self._values)})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict (enums and models flattened)."""
        return {name: _plain(value) for name, value in self._values.items()}


# =============================================================================
# Graph
# =============================================================================


class RuleGraph:
    """A validated, topologically ordered set of rules."""

    def __init__(self, rules: Iterable[Rule], inputs: Iterable[str] = ("code",)):
        self.inputs: tuple[str, ...] = tuple(inputs)
        self._rules: dict[str, Rule] = {}

        for r in rules:
            if r.name in self._rules:
                raise RuleGraphError(f"Duplicate rule name '{r.name}'")
            if r.name in self.inputs:
                raise RuleGraphError(f"Rule '{r.name}' shadows an input")
            self._rules[r.name] = r

        known = set(self._rules) | set(self.inputs)
        for r in self._rules.values():
            unknown = [dep for dep in r.requires if dep not in known]
            if unknown:
                raise RuleGraphError(
                    f"Rule '{r.name}' requires unknown attributes: {', '.join(unknown)}"
                )

        self._deps = {name: list(r.requires) for name, r in self._rules.items()}
        self.order: tuple[str, ...] = tuple(topological_sort(self._deps))

        logger.debug(
            "Built rule graph with %d rules over inputs %s",
            len(self.order),
            self.inputs,
        )

    @property
    def rules(self) -> Mapping[str, Rule]:
        return dict(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def dependencies_of(self, name: str) -> set[str]:
        """Transitive dependencies of a rule, inputs included.

        Raises:
            KeyError: If ``name`` is not a rule of this graph.
        """
        if name not in self._rules:
            raise KeyError(name)
        return transitive_dependencies(self._deps, name)

    def _plan(self, mode: str, select: list[str] | None) -> list[str]:
        """Rules to evaluate, in dependency order."""
        if mode not in RESOLUTION_MODES:
            raise ValueError(
                f"Unknown resolution mode {mode!r}. Expected one of {RESOLUTION_MODES}"
            )
        if mode == "eager" or select is None:
            return list(self.order)

        needed: set[str] = set()
        for name in select:
            if name in self._rules:
                needed.add(name)
                needed |= self.dependencies_of(name)
        return [name for name in self.order if name in needed]

    def resolve(
        self,
        inputs: Mapping[str, Any],
        *,
        mode: ResolutionMode = "eager",
        select: Iterable[str] | None = None,
    ) -> AttributeProfile:
        """
        Run the rules over one set of inputs.

        Args:
            inputs: Values for every declared input name
            mode: "eager" evaluates every rule; "lazy" evaluates only the
                selected attributes and what they depend on
            select: Attribute names to return (default: all evaluated rules);
                a single name may be passed as a plain string

        Returns:
            AttributeProfile of the selected (or all evaluated) attributes

        Raises:
            RuleGraphError: If an input is missing
            KeyError: If a selected name is neither a rule nor an input
            DerivationError: If a rule fails on the given inputs
        """
        missing = [name for name in self.inputs if name not in inputs]
        if missing:
            raise RuleGraphError(f"Missing inputs: {', '.join(missing)}")

        if isinstance(select, str):
            select = [select]
        selected = list(select) if select is not None else None
        if selected is not None:
            for name in selected:
                if name not in self._rules and name not in self.inputs:
                    raise KeyError(name)

        plan = self._plan(mode, selected)

        # Values computed in this pass; each rule is evaluated once.
        values: dict[str, Any] = {name: inputs[name] for name in self.inputs}
        for name in plan:
            r = self._rules[name]
            kwargs = {dep: values[dep] for dep in r.requires}
            try:
                values[name] = r.fn(**kwargs)
            except TypologyError:
                raise
            except (LookupError, ValueError, TypeError, AttributeError) as e:
                raise DerivationError(
                    f"Rule '{name}' failed for inputs {dict(inputs)!r}: {e}"
                ) from e

        names = selected if selected is not None else plan
        logger.debug("Resolved %d of %d rules (%s mode)", len(plan), len(self), mode)

        code = inputs.get("code")
        return AttributeProfile(
            {name: values[name] for name in names},
            code=code if isinstance(code, str) else None,
        )
