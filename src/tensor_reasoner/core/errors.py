"""
Error Types for Tensor Reasoner

Every failure is raised at the point where a precondition is violated.
All errors derive from TensorLogicError and from the builtin exception
that best describes them, so callers can catch either.
"""


class TensorLogicError(Exception):
    """Base class for all engine errors."""


class InvalidShapeError(TensorLogicError, ValueError):
    """Shape is empty, has non-positive dimensions, or does not match values."""


class IncompatibleTypesError(TensorLogicError, TypeError):
    """An operand is not a Tensor."""


class IncompatibleShapeError(TensorLogicError, ValueError):
    """Operand shapes cannot be combined."""


class UnsupportedRankError(TensorLogicError, ValueError):
    """Operation attempted on an unsupported rank."""


class ArityError(TensorLogicError, ValueError):
    """Wrong number of operands for a logic rule."""


class EmptyInputError(TensorLogicError, ValueError):
    """Operand list is empty."""


class FactNotFoundError(TensorLogicError, KeyError):
    """Fact label is not in the knowledge base vocabulary."""

    def __init__(self, fact: str):
        super().__init__(fact)
        self.fact = fact

    def __str__(self):
        return f"Unknown fact: {self.fact!r}"


class RelationNotFoundError(TensorLogicError, KeyError):
    """Relation name was never added to the knowledge base."""

    def __init__(self, relation: str):
        super().__init__(relation)
        self.relation = relation

    def __str__(self):
        return f"Unknown relation: {self.relation!r}"


class DuplicateFactError(TensorLogicError, ValueError):
    """Fact vocabulary contains the same label twice."""


class ConfigError(TensorLogicError, ValueError):
    """Knowledge base definition is malformed."""
