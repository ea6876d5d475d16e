"""Tests for the attribute graph resolver."""

from collections import Counter

import pytest

from typology.core.dichotomies import all_type_codes
from typology.core.errors import (
    CyclicRuleGraphError,
    DerivationError,
    RuleGraphError,
)
from typology.engine.graph import AttributeProfile, Rule, RuleGraph, rule
from typology.engine.profile import TYPE_GRAPH


def _counting_graph(calls: Counter) -> RuleGraph:
    """Diamond: base feeds left and right, both feed top."""

    @rule()
    def base(x):
        calls["base"] += 1
        return x + 1

    @rule()
    def left(base):
        calls["left"] += 1
        return base * 2

    @rule()
    def right(base):
        calls["right"] += 1
        return base * 3

    @rule()
    def top(left, right):
        calls["top"] += 1
        return left + right

    return RuleGraph([top, right, left, base], inputs=("x",))


class TestRuleDecorator:
    def test_requires_inferred_from_parameters(self):
        @rule()
        def dominant(attitude, lifestyle):
            return attitude + lifestyle

        assert isinstance(dominant, Rule)
        assert dominant.name == "dominant"
        assert dominant.requires == ("attitude", "lifestyle")
        assert dominant(attitude="I", lifestyle="P") == "IP"

    def test_explicit_name_and_requires(self):
        @rule("shout", requires=["word"])
        def _upper(**kwargs):
            return kwargs["word"].upper()

        assert _upper.name == "shout"
        assert _upper.requires == ("word",)


class TestGraphSetup:
    def test_order_respects_dependencies(self):
        graph = _counting_graph(Counter())
        order = list(graph.order)
        assert order.index("base") < order.index("left") < order.index("top")
        assert order.index("right") < order.index("top")

    def test_cycle_detected_at_construction(self):
        a = Rule(name="a", requires=("b",), fn=lambda b: b)
        b = Rule(name="b", requires=("a",), fn=lambda a: a)
        with pytest.raises(CyclicRuleGraphError):
            RuleGraph([a, b], inputs=("code",))

    def test_unknown_dependency_rejected(self):
        a = Rule(name="a", requires=("missing",), fn=lambda missing: missing)
        with pytest.raises(RuleGraphError, match="unknown attributes: missing"):
            RuleGraph([a], inputs=("code",))

    def test_duplicate_rule_rejected(self):
        a = Rule(name="a", requires=("code",), fn=lambda code: code)
        with pytest.raises(RuleGraphError, match="Duplicate"):
            RuleGraph([a, a], inputs=("code",))

    def test_rule_shadowing_input_rejected(self):
        code = Rule(name="code", requires=(), fn=lambda: "INTP")
        with pytest.raises(RuleGraphError, match="shadows"):
            RuleGraph([code], inputs=("code",))

    def test_cyclic_error_is_a_graph_error(self):
        assert issubclass(CyclicRuleGraphError, RuleGraphError)


class TestResolve:
    def test_each_rule_runs_once_per_pass(self):
        calls: Counter = Counter()
        graph = _counting_graph(calls)

        profile = graph.resolve({"x": 1})

        assert profile["top"] == 10
        assert calls == Counter(base=1, left=1, right=1, top=1)

    def test_passes_are_independent(self):
        calls: Counter = Counter()
        graph = _counting_graph(calls)

        first = graph.resolve({"x": 1})
        second = graph.resolve({"x": 2})

        assert first["top"] == 10
        assert second["top"] == 15
        assert calls["base"] == 2

    def test_lazy_evaluates_only_what_is_needed(self):
        calls: Counter = Counter()
        graph = _counting_graph(calls)

        profile = graph.resolve({"x": 1}, mode="lazy", select=["left"])

        assert dict(profile) == {"left": 4}
        assert calls == Counter(base=1, left=1)

    def test_eager_with_select_returns_selection(self):
        calls: Counter = Counter()
        graph = _counting_graph(calls)

        profile = graph.resolve({"x": 1}, mode="eager", select=["left"])

        assert dict(profile) == {"left": 4}
        assert calls["right"] == 1

    def test_select_can_include_inputs(self):
        graph = _counting_graph(Counter())
        profile = graph.resolve({"x": 5}, mode="lazy", select=["x", "base"])
        assert dict(profile) == {"x": 5, "base": 6}

    def test_unknown_select_raises_key_error(self):
        graph = _counting_graph(Counter())
        with pytest.raises(KeyError):
            graph.resolve({"x": 1}, select=["nope"])

    def test_missing_input_raises(self):
        graph = _counting_graph(Counter())
        with pytest.raises(RuleGraphError, match="Missing inputs: x"):
            graph.resolve({})

    def test_unknown_mode_raises(self):
        graph = _counting_graph(Counter())
        with pytest.raises(ValueError, match="Unknown resolution mode"):
            graph.resolve({"x": 1}, mode="sometimes")  # type: ignore[arg-type]

    def test_rule_failure_becomes_derivation_error(self):
        @rule()
        def broken(code):
            return {"E": 1}[code]

        graph = RuleGraph([broken], inputs=("code",))
        with pytest.raises(DerivationError, match="Rule 'broken' failed") as exc_info:
            graph.resolve({"code": "I"})
        assert isinstance(exc_info.value.__cause__, KeyError)

    @pytest.mark.parametrize(
        "body, cause",
        [
            (lambda code: code.missing_attr, AttributeError),
            (lambda code: code[10], IndexError),
        ],
    )
    def test_other_rule_failures_are_wrapped(self, body, cause):
        broken = Rule(name="broken", requires=("code",), fn=body)
        graph = RuleGraph([broken], inputs=("code",))
        with pytest.raises(DerivationError, match="Rule 'broken' failed") as exc_info:
            graph.resolve({"code": "INTP"})
        assert isinstance(exc_info.value.__cause__, cause)

    def test_single_select_name_as_string(self):
        calls = Counter()
        graph = _counting_graph(calls)
        profile = graph.resolve({"x": 1}, mode="lazy", select="left")
        assert list(profile) == ["left"]
        assert "top" not in calls

    def test_dependencies_of(self):
        graph = _counting_graph(Counter())
        assert graph.dependencies_of("top") == {"left", "right", "base", "x"}
        with pytest.raises(KeyError):
            graph.dependencies_of("x")


class TestAttributeProfile:
    def test_profile_is_read_only_mapping(self):
        profile = AttributeProfile({"a": 1}, code="INTP")
        assert profile["a"] == 1
        assert list(profile) == ["a"]
        assert len(profile) == 1
        assert profile.code == "INTP"
        with pytest.raises(TypeError):
            profile["a"] = 2  # type: ignore[index]

    def test_profile_copies_its_values(self):
        values = {"a": 1}
        profile = AttributeProfile(values)
        values["a"] = 2
        assert profile["a"] == 1


class TestTypeGraph:
    def test_type_graph_has_every_attribute(self):
        expected = {
            "attitude",
            "perceiving_letter",
            "judging_letter",
            "lifestyle",
            "is_introvert",
            "is_extravert",
            "is_sensing",
            "is_intuitive",
            "is_thinking",
            "is_feeling",
            "is_perceiving_lifestyle",
            "is_judging_lifestyle",
            "preferred_letter",
            "extraverted_function",
            "introverted_function",
            "dominant",
            "auxiliary",
            "tertiary",
            "inferior",
            "function_stack",
            "prefers_rational",
            "prefers_irrational",
            "ratio",
            "temperament",
        }
        assert set(TYPE_GRAPH.order) == expected

    def test_temperament_is_independent_of_dynamics(self):
        deps = TYPE_GRAPH.dependencies_of("temperament")
        assert "dominant" not in deps
        assert "auxiliary" not in deps

    @pytest.mark.parametrize("code", all_type_codes())
    def test_lazy_and_eager_agree(self, code):
        eager = TYPE_GRAPH.resolve({"code": code}, mode="eager")
        for name in ("dominant", "inferior", "ratio", "temperament"):
            lazy = TYPE_GRAPH.resolve({"code": code}, mode="lazy", select=[name])
            assert lazy[name] == eager[name]
