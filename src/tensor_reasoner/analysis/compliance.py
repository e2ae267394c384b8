"""
Rule Compliance Checking for Tensor Reasoner

Verify that a stored relation agrees with a composition of others.

For composition rule: R3(x,z) <- R1(x,y), R2(y,z)
    Compliance measure: ||R3 - R1 @ R2|| / ||R3||

Lower compliance error = better rule adherence.
"""

import torch
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..knowledge.base import KnowledgeBase


@dataclass
class ComplianceResult:
    """Result of rule compliance check."""

    rule_name: str
    head_relation: str
    body_relations: Tuple[str, ...]
    error: float
    relative_error: float


class RuleComplianceChecker:
    """Check knowledge-base relations against composition rules."""

    def __init__(self, tolerance: float = 0.1):
        self.tolerance = tolerance

    def check_composition(
        self,
        kb: KnowledgeBase,
        head: str,
        body: Sequence[str],
    ) -> ComplianceResult:
        """
        Check composition rule: head <- body[0] @ body[1] @ ...

        Args:
            kb: Knowledge base holding every named relation
            head: Head relation name
            body: Body relation names

        Returns:
            ComplianceResult
        """
        R_head = kb.get_relation(head).data
        R_composed = kb.compose(body).data

        diff = R_head - R_composed
        abs_error = torch.norm(diff).item()
        rel_error = abs_error / (torch.norm(R_head).item() + 1e-10)

        return ComplianceResult(
            rule_name=f"{head} <- {', '.join(body)}",
            head_relation=head,
            body_relations=tuple(body),
            error=abs_error,
            relative_error=rel_error,
        )

    def summary(self, results: List[ComplianceResult]) -> str:
        """Generate summary of rule compliance."""
        lines = ["=" * 60, " Rule Compliance Summary", "=" * 60, ""]

        for r in results:
            status = "GOOD" if r.relative_error < self.tolerance else "BAD"
            lines.append(f"Rule: {r.rule_name}")
            lines.append(f"  Relative error: {r.relative_error:.4f} [{status}]")
            lines.append("")

        avg_error = sum(r.relative_error for r in results) / len(results) if results else 0
        lines.append(f"Average relative error: {avg_error:.4f}")
        lines.append("=" * 60)

        return "\n".join(lines)
