"""Knowledge base definitions and sample data."""

from .config import RelationSpec, KnowledgeBaseConfig
from .family import FamilyTree

__all__ = ["RelationSpec", "KnowledgeBaseConfig", "FamilyTree"]
