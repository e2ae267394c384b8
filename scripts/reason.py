#!/usr/bin/env python3
"""
Run a Reasoning Query Against a Knowledge Base

This script:
    1. Loads a knowledge base definition (JSON) or generates a family tree
    2. Propagates confidence from a query fact along a relation chain
    3. Prints the reached facts, highest confidence first
    4. Optionally stores the composed chain as a new relation
    5. Optionally checks a stored relation against the composed chain

Examples:
    python scripts/reason.py --kb weather.json --query Rain --chain causes causes
    python scripts/reason.py --family 2 --query F0_G0_P0 --chain parent parent
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import argparse
import logging

from tensor_reasoner import TensorLogicError
from tensor_reasoner.data import KnowledgeBaseConfig, FamilyTree
from tensor_reasoner.analysis import RuleComplianceChecker


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Multi-hop fuzzy reasoning over a knowledge base")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--kb", type=str, help="Path to a JSON knowledge base definition")
    source.add_argument("--family", type=int, metavar="N",
                        help="Generate N synthetic family trees instead of loading a file")
    parser.add_argument("--family_depth", type=int, default=3)
    parser.add_argument("--query", type=str, required=True, help="Seed fact")
    parser.add_argument("--chain", type=str, nargs="*", default=[],
                        help="Relation names applied in order")
    parser.add_argument("--top", type=int, default=0, help="Show only the top K results (0 = all)")
    parser.add_argument("--derive", type=str, default=None,
                        help="Store the composed chain under this relation name")
    parser.add_argument("--check", type=str, default=None, metavar="HEAD",
                        help="Check that stored relation HEAD equals the composed chain")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def load_knowledge_base(args):
    if args.kb:
        return KnowledgeBaseConfig.from_json(args.kb).build()
    return FamilyTree(num_families=args.family, family_depth=args.family_depth).to_knowledge_base()


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        kb = load_knowledge_base(args)
        result = kb.reason(args.query, args.chain)
    except (TensorLogicError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    ranked = result.ranked()
    if args.top > 0:
        ranked = ranked[:args.top]

    print("=" * 60)
    print(f" Query: {result.query}")
    print(f" Chain: {' -> '.join(result.relations) if result.relations else '(none)'}")
    print("=" * 60)
    if not ranked:
        print("  No facts reached.")
    for fact, confidence in ranked:
        print(f"  {fact:<30s} {confidence:.4f}")

    if args.derive:
        kb.derive_relation(args.derive, args.chain)
        print()
        print(f"Derived relation '{args.derive}' from {len(args.chain)} hop(s)")

    if args.check:
        checker = RuleComplianceChecker()
        try:
            compliance = checker.check_composition(kb, args.check, args.chain)
        except TensorLogicError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print()
        print(checker.summary([compliance]))

    return 0


if __name__ == "__main__":
    sys.exit(main())
