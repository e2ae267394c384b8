"""Analysis tools for Tensor Reasoner."""

from .compliance import ComplianceResult, RuleComplianceChecker

__all__ = ["ComplianceResult", "RuleComplianceChecker"]
