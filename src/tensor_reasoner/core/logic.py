"""
Fuzzy Logic Rules for Tensor Reasoner

Mathematical basis (truth values conventionally in [0, 1], not clamped):
    AND(A, B, ...)  = min(A, B, ...)
    OR(A, B, ...)   = max(A, B, ...)
    NOT(A)          = 1 - A
    IMPLIES(A, B)   = max(1 - A, B)

Every rule is an element-wise reduction over the stacked operands:
    stacked: [num_inputs, *shape]  ->  result: [*shape]
"""

import logging
import torch
from enum import Enum
from typing import Callable, Dict, Sequence, Union

from .errors import ArityError, EmptyInputError
from .tensor import Tensor, apply_elementwise

logger = logging.getLogger(__name__)


class LogicRule(Enum):
    """Supported fuzzy connectives."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    IMPLIES = "IMPLIES"

    @classmethod
    def parse(cls, name: Union[str, "LogicRule"]) -> "LogicRule":
        """Resolve a rule from its (case-insensitive) name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).upper())
        except ValueError:
            valid = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown logic rule: {name!r} (expected one of {valid})") from None

    def __str__(self):
        return self.value


def _and(inputs: Sequence[Tensor]) -> Tensor:
    if len(inputs) < 2:
        raise ArityError(f"AND requires at least 2 operands, got {len(inputs)}")
    return apply_elementwise(inputs, lambda s: s.amin(dim=0))


def _or(inputs: Sequence[Tensor]) -> Tensor:
    if len(inputs) < 2:
        raise ArityError(f"OR requires at least 2 operands, got {len(inputs)}")
    return apply_elementwise(inputs, lambda s: s.amax(dim=0))


def _not(inputs: Sequence[Tensor]) -> Tensor:
    # Only the first operand takes part
    return apply_elementwise(inputs[:1], lambda s: 1.0 - s[0])


def _implies(inputs: Sequence[Tensor]) -> Tensor:
    if len(inputs) != 2:
        raise ArityError(f"IMPLIES requires exactly 2 operands, got {len(inputs)}")
    return apply_elementwise(inputs, lambda s: torch.maximum(1.0 - s[0], s[1]))


_HANDLERS: Dict[LogicRule, Callable[[Sequence[Tensor]], Tensor]] = {
    LogicRule.AND: _and,
    LogicRule.OR: _or,
    LogicRule.NOT: _not,
    LogicRule.IMPLIES: _implies,
}


def apply_logic_rule(rule: Union[LogicRule, str], inputs: Sequence[Tensor]) -> Tensor:
    """
    Apply a fuzzy logic rule element-wise.

    Args:
        rule: LogicRule or its name
        inputs: Operand tensors of a common shape

    Returns:
        Tensor with the shape of inputs[0]
    """
    rule = LogicRule.parse(rule)
    inputs = list(inputs)
    if not inputs:
        raise EmptyInputError(f"{rule} requires at least one operand")

    logger.debug("Applying %s to %d operand(s)", rule, len(inputs))
    return _HANDLERS[rule](inputs)


def fuzzy_and(*tensors: Tensor) -> Tensor:
    """A ∧ B ∧ ... = min(A, B, ...)"""
    return apply_logic_rule(LogicRule.AND, tensors)


def fuzzy_or(*tensors: Tensor) -> Tensor:
    """A ∨ B ∨ ... = max(A, B, ...)"""
    return apply_logic_rule(LogicRule.OR, tensors)


def fuzzy_not(tensor: Tensor) -> Tensor:
    """¬A = 1 - A"""
    return apply_logic_rule(LogicRule.NOT, [tensor])


def fuzzy_implies(antecedent: Tensor, consequent: Tensor) -> Tensor:
    """A -> B = max(1 - A, B)"""
    return apply_logic_rule(LogicRule.IMPLIES, [antecedent, consequent])
