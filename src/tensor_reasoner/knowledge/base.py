"""
Symbolic Knowledge Base for Tensor Reasoner

Mathematical basis:
    Fact i        ->  basis vector e_i ∈ R^n    (n = number of facts)
    Relation R    ->  adjacency matrix R ∈ R^(n×n)
                      R[from, to] = strength of from -> to

Single inference step (propagate along directed edges):
    v_{k+1}[i] = Σ_j R[j, i] * v_k[j]   i.e.  v_{k+1} = R^T @ v_k

Multi-hop reasoning over a chain R1, R2, ..., Rm:
    v_m = Rm^T @ ... @ R2^T @ R1^T @ e_query
        = row `query` of (R1 @ R2 @ ... @ Rm)

Along a single path the strengths multiply; confidences arriving at the
same fact through different paths add up.
"""

import logging
import torch
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from ..core.errors import DuplicateFactError, FactNotFoundError, RelationNotFoundError
from ..core.tensor import DTYPE, Tensor

logger = logging.getLogger(__name__)


@dataclass
class ReasoningResult:
    """Outcome of a reasoning query."""

    query: str
    relations: List[str]
    results: List[Tuple[str, float]] = field(default_factory=list)

    def confidence(self, fact: str) -> float:
        """Confidence for fact (0.0 if it was not reached)."""
        for name, score in self.results:
            if name == fact:
                return score
        return 0.0

    def ranked(self) -> List[Tuple[str, float]]:
        """Results by descending confidence; ties keep vocabulary order."""
        return sorted(self.results, key=lambda r: -r[1])

    def __str__(self):
        chain = " -> ".join(self.relations) if self.relations else "(identity)"
        return f"{self.query} via {chain}: {len(self.results)} fact(s)"


class KnowledgeBase:
    """
    Fixed fact vocabulary plus named relations over it.

    Attributes:
        facts: Fact labels; position is the basis index
        fact_count: Number of facts
        fact_tensor: [n, n] identity, one basis vector per fact
        relations: Relation name -> [n, n] adjacency Tensor

    The relation registry belongs to this instance. Mutation from several
    threads must be serialised by the caller.
    """

    def __init__(self, facts: Sequence[str]):
        """
        Build a knowledge base.

        Args:
            facts: Unique fact labels
        """
        facts = list(facts)
        seen = set()
        duplicates = []
        for fact in facts:
            if fact in seen and fact not in duplicates:
                duplicates.append(fact)
            seen.add(fact)
        if duplicates:
            raise DuplicateFactError(f"Duplicate fact labels: {duplicates}")

        self.facts: Tuple[str, ...] = tuple(facts)
        self.fact_count = len(self.facts)
        self.fact_to_idx: Dict[str, int] = {f: i for i, f in enumerate(self.facts)}
        self.relations: Dict[str, Tensor] = {}

        # Structural only; reasoning seeds its own one-hot vector
        self.fact_tensor = Tensor.identity(self.fact_count)

    def index_of(self, fact: str) -> int:
        """Basis index of a fact."""
        try:
            return self.fact_to_idx[fact]
        except (KeyError, TypeError):
            raise FactNotFoundError(fact) from None

    @property
    def relation_names(self) -> List[str]:
        return list(self.relations)

    def has_relation(self, name: str) -> bool:
        return name in self.relations

    def get_relation(self, name: str) -> Tensor:
        """Copy of a relation's adjacency matrix."""
        if name not in self.relations:
            raise RelationNotFoundError(name)
        return Tensor.from_torch(self.relations[name].data)

    def add_relation(
        self,
        name: str,
        from_fact: str,
        to_fact: str,
        strength: float = 1.0,
    ):
        """
        Add (or overwrite) the edge from_fact -> to_fact under a relation.

        The relation matrix is created as zeros the first time its name is
        used. Strength is stored as given; range checks belong to the
        configuration layer.

        Args:
            name: Relation name
            from_fact: Source fact
            to_fact: Target fact
            strength: Edge weight
        """
        # Resolve before touching the registry so failures leave no trace
        from_idx = self.index_of(from_fact)
        to_idx = self.index_of(to_fact)
        strength = float(strength)

        if name not in self.relations:
            logger.debug("Creating relation %r (%dx%d)", name, self.fact_count, self.fact_count)
            self.relations[name] = Tensor.zeros([self.fact_count, self.fact_count])

        self.relations[name][from_idx, to_idx] = strength

    def _check_chain(self, chain: Sequence[str]) -> List[str]:
        chain = list(chain)
        for rel in chain:
            if rel not in self.relations:
                raise RelationNotFoundError(rel)
        return chain

    def compose(self, chain: Sequence[str]) -> Tensor:
        """
        Compose relations via matrix multiplication.

        R_composed = R1 @ R2 @ ... @ Rm

        This implements the rule:
            Composed(x,z) <- R1(x,y1), R2(y1,y2), ..., Rm(y_{m-1},z)

        Args:
            chain: Relation names (empty -> identity)

        Returns:
            [n, n] composed relation matrix
        """
        chain = self._check_chain(chain)
        result = torch.eye(self.fact_count, dtype=DTYPE)
        for rel in chain:
            result = torch.mm(result, self.relations[rel].data)
        return Tensor.from_torch(result)

    def reason(self, query: str, chain: Sequence[str] = ()) -> ReasoningResult:
        """
        Propagate confidence from a query fact along a relation chain.

        Args:
            query: Seed fact
            chain: Relation names applied in order

        Returns:
            ReasoningResult with every fact whose confidence is > 0,
            in vocabulary order
        """
        query_idx = self.index_of(query)
        chain = self._check_chain(chain)

        v = torch.zeros(self.fact_count, dtype=DTYPE)
        v[query_idx] = 1.0

        for hop, rel in enumerate(chain, start=1):
            # v' = R^T @ v
            v = torch.mv(self.relations[rel].data.t(), v)
            logger.debug(
                "Hop %d via %r: %d fact(s) reached", hop, rel, int((v > 0).sum().item())
            )

        results = [
            (self.facts[i], v[i].item())
            for i in range(self.fact_count)
            if v[i].item() > 0.0
        ]

        return ReasoningResult(query=query, relations=chain, results=results)

    def query(self, from_fact: str, to_fact: str, chain: Sequence[str]) -> float:
        """
        Confidence that to_fact is reached from from_fact through chain.

        score = e_from^T @ (R1 @ ... @ Rm) @ e_to
        """
        from_idx = self.index_of(from_fact)
        to_idx = self.index_of(to_fact)
        return self.compose(chain)[from_idx, to_idx]

    def derive_relation(
        self,
        name: str,
        chain: Sequence[str],
        threshold: float = 0.0,
    ) -> Tensor:
        """
        Materialise a composed relation under a new name.

        Args:
            name: Name for the derived relation (overwritten if present)
            chain: Relation names to compose
            threshold: If > 0, entries below it are zeroed

        Returns:
            Copy of the stored matrix
        """
        composed = self.compose(chain).data

        if threshold > 0:
            composed = torch.where(composed >= threshold, composed, torch.zeros_like(composed))

        logger.debug("Deriving relation %r from %s", name, list(chain))
        self.relations[name] = Tensor.from_torch(composed)
        return self.get_relation(name)

    def __repr__(self) -> str:
        return (
            f"KnowledgeBase(\n"
            f"  fact_count={self.fact_count},\n"
            f"  relations={{{', '.join(f'{k}: {int((v.data != 0).sum())}' for k, v in self.relations.items())}}}\n"
            f")"
        )


def create_knowledge_base(facts: Sequence[str]) -> KnowledgeBase:
    """Build a knowledge base; see KnowledgeBase.__init__."""
    return KnowledgeBase(facts)
