"""Symbolic knowledge base and multi-hop reasoner."""

from .base import KnowledgeBase, ReasoningResult, create_knowledge_base

__all__ = ["KnowledgeBase", "ReasoningResult", "create_knowledge_base"]
