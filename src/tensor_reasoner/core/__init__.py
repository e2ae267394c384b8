"""Core tensor and fuzzy-logic components for Tensor Reasoner."""

from .tensor import Tensor, create_tensor, multiply, transpose, apply_elementwise
from .logic import (
    LogicRule,
    apply_logic_rule,
    fuzzy_and,
    fuzzy_or,
    fuzzy_not,
    fuzzy_implies,
)

__all__ = [
    "Tensor",
    "create_tensor",
    "multiply",
    "transpose",
    "apply_elementwise",
    "LogicRule",
    "apply_logic_rule",
    "fuzzy_and",
    "fuzzy_or",
    "fuzzy_not",
    "fuzzy_implies",
]
