"""
Tensor Reasoner: Fuzzy Neuro-Symbolic Inference

Mathematical foundation:
    - Facts are basis vectors
    - Relations are adjacency matrices
    - Reasoning is chained matrix-vector products
    - Logic connectives are element-wise min / max / complement
"""

from .core.errors import (
    TensorLogicError,
    InvalidShapeError,
    IncompatibleTypesError,
    IncompatibleShapeError,
    UnsupportedRankError,
    ArityError,
    EmptyInputError,
    FactNotFoundError,
    RelationNotFoundError,
    DuplicateFactError,
    ConfigError,
)
from .core.tensor import Tensor, create_tensor, multiply, transpose, apply_elementwise
from .core.logic import (
    LogicRule,
    apply_logic_rule,
    fuzzy_and,
    fuzzy_or,
    fuzzy_not,
    fuzzy_implies,
)
from .knowledge.base import KnowledgeBase, ReasoningResult, create_knowledge_base

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
    "KnowledgeBase",
    "ReasoningResult",
    "create_knowledge_base",
    "TensorLogicError",
    "InvalidShapeError",
    "IncompatibleTypesError",
    "IncompatibleShapeError",
    "UnsupportedRankError",
    "ArityError",
    "EmptyInputError",
    "FactNotFoundError",
    "RelationNotFoundError",
    "DuplicateFactError",
    "ConfigError",
]
