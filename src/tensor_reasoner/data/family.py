"""
Synthetic Family Tree for Tensor Reasoner

Relations:
    parent(x, y)  - x is parent of y

Derived by reasoning:
    grandparent(x, z) <- parent(x, y), parent(y, z)

Useful for exercising multi-hop reasoning on a vocabulary larger than a
handful of hand-written facts.
"""

from typing import Dict, List, Set, Tuple

from ..knowledge.base import KnowledgeBase

PARENT = "parent"


class FamilyTree:
    """
    Independent family trees of fixed depth and branching.

    Entities are named F{family}_G{generation}_P{position}.
    """

    def __init__(
        self,
        num_families: int = 2,
        family_depth: int = 3,
        children_per_parent: int = 2,
    ):
        """
        Generate family trees.

        Args:
            num_families: Number of independent family trees
            family_depth: Generations per family
            children_per_parent: Children per parent
        """
        self.num_families = num_families
        self.family_depth = family_depth
        self.children_per_parent = children_per_parent

        self.entities: List[str] = []
        self.entity2idx: Dict[str, int] = {}
        self.parent_facts: Set[Tuple[str, str]] = set()

        self._generate_families()

    def _add_entity(self, name: str) -> str:
        if name not in self.entity2idx:
            self.entity2idx[name] = len(self.entities)
            self.entities.append(name)
        return name

    def _generate_families(self):
        for family_id in range(self.num_families):
            generation = [[self._add_entity(f"F{family_id}_G0_P0")]]

            for gen in range(1, self.family_depth):
                next_gen = []
                for parent in generation[-1]:
                    for _ in range(self.children_per_parent):
                        child = self._add_entity(f"F{family_id}_G{gen}_P{len(next_gen)}")
                        next_gen.append(child)
                        self.parent_facts.add((parent, child))
                generation.append(next_gen)

    def grandparent_pairs(self) -> Set[Tuple[str, str]]:
        """(grandparent, grandchild) pairs computed symbolically."""
        children_of: Dict[str, List[str]] = {}
        for p, c in self.parent_facts:
            children_of.setdefault(p, []).append(c)

        pairs = set()
        for x, ys in children_of.items():
            for y in ys:
                for z in children_of.get(y, []):
                    pairs.add((x, z))
        return pairs

    def to_knowledge_base(self) -> KnowledgeBase:
        """Knowledge base with one 'parent' relation (strength 1.0)."""
        kb = KnowledgeBase(self.entities)
        for parent, child in sorted(self.parent_facts):
            kb.add_relation(PARENT, parent, child)
        return kb

    def __repr__(self) -> str:
        return (
            f"FamilyTree(num_entities={len(self.entities)}, "
            f"parent_facts={len(self.parent_facts)})"
        )
