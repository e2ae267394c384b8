"""
Fuzzy logic rule tests

AND = min, OR = max, NOT = 1 - x, IMPLIES = max(1 - A, B).
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tensor_reasoner import (
    LogicRule,
    apply_logic_rule,
    create_tensor,
    fuzzy_and,
    fuzzy_or,
    fuzzy_not,
    fuzzy_implies,
    ArityError,
    EmptyInputError,
    IncompatibleTypesError,
)


@pytest.fixture
def pair():
    return (
        create_tensor([3], [0.8, 0.5, 0.3]),
        create_tensor([3], [0.6, 0.9, 0.4]),
    )


class TestRules:
    """Per-rule formulas"""

    def test_and_is_min(self, pair) -> None:
        assert apply_logic_rule(LogicRule.AND, pair).values == pytest.approx([0.6, 0.5, 0.3])

    def test_or_is_max(self, pair) -> None:
        assert apply_logic_rule(LogicRule.OR, pair).values == pytest.approx([0.8, 0.9, 0.4])

    def test_not_is_complement(self) -> None:
        t = create_tensor([3], [1, 0, 0.5])
        assert apply_logic_rule(LogicRule.NOT, [t]).values == pytest.approx([0, 1, 0.5])

    def test_implies_truth_table(self) -> None:
        a = create_tensor([4], [1, 1, 0, 0])
        b = create_tensor([4], [1, 0, 1, 0])
        assert apply_logic_rule(LogicRule.IMPLIES, [a, b]).values == [1, 0, 1, 1]

    def test_and_over_three_inputs(self) -> None:
        ts = [create_tensor([2], v) for v in ([0.9, 0.2], [0.4, 0.7], [0.6, 0.5])]
        assert fuzzy_and(*ts).values == pytest.approx([0.4, 0.2])
        assert fuzzy_or(*ts).values == pytest.approx([0.9, 0.7])

    def test_rank_two_operands(self) -> None:
        a = create_tensor([2, 2], [[0.1, 0.9], [0.5, 0.3]])
        b = create_tensor([2, 2], [[0.2, 0.8], [0.4, 0.6]])
        result = fuzzy_and(a, b)
        assert result.shape == (2, 2)
        assert result.values == [[0.1, 0.8], [0.4, 0.3]]

    def test_not_ignores_extra_operands(self) -> None:
        a = create_tensor([2], [0.25, 1.0])
        b = create_tensor([2], [0.0, 0.0])
        assert apply_logic_rule(LogicRule.NOT, [a, b]).values == [0.75, 0.0]

    def test_values_are_not_clamped(self) -> None:
        t = create_tensor([2], [2.0, -1.0])
        assert fuzzy_not(t).values == [-1.0, 2.0]

    def test_implies_helper(self) -> None:
        a = create_tensor([2], [0.7, 0.2])
        b = create_tensor([2], [0.1, 0.1])
        assert fuzzy_implies(a, b).values == pytest.approx([0.3, 0.8])

    def test_inputs_untouched(self, pair) -> None:
        fuzzy_not(pair[0])
        assert pair[0].values == [0.8, 0.5, 0.3]


class TestArity:
    """Operand count checks"""

    @pytest.mark.parametrize("rule", list(LogicRule))
    def test_empty_input(self, rule) -> None:
        with pytest.raises(EmptyInputError):
            apply_logic_rule(rule, [])

    @pytest.mark.parametrize("rule", [LogicRule.AND, LogicRule.OR, LogicRule.IMPLIES])
    def test_single_operand(self, rule) -> None:
        with pytest.raises(ArityError):
            apply_logic_rule(rule, [create_tensor([2])])

    @pytest.mark.parametrize("rule", list(LogicRule))
    def test_non_tensor_operand(self, rule) -> None:
        """Plain lists are rejected as operands, not duck-typed."""
        with pytest.raises(IncompatibleTypesError):
            apply_logic_rule(rule, [[0.1], [0.2]])

    def test_non_tensor_second_operand(self) -> None:
        with pytest.raises(IncompatibleTypesError):
            fuzzy_and(create_tensor([1], [0.1]), [0.2])

    def test_implies_three_operands(self) -> None:
        ts = [create_tensor([2]) for _ in range(3)]
        with pytest.raises(ArityError):
            apply_logic_rule(LogicRule.IMPLIES, ts)


class TestRuleNames:
    """String names at the boundary"""

    def test_case_insensitive(self, pair) -> None:
        assert apply_logic_rule("and", pair) == apply_logic_rule(LogicRule.AND, pair)
        assert LogicRule.parse("Implies") is LogicRule.IMPLIES

    def test_unknown_name(self, pair) -> None:
        with pytest.raises(ValueError):
            apply_logic_rule("XOR", pair)
