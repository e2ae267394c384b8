"""
Knowledge Base Definitions

A knowledge base can be described declaratively and built in one step:

    {
        "facts": ["Rain", "Clouds", "Wet"],
        "relations": [
            {"name": "causes", "from": "Rain", "to": "Clouds", "strength": 0.8},
            {"name": "causes", "from": "Clouds", "to": "Wet", "strength": 0.6}
        ]
    }

Relation strengths are validated here, at the boundary; the engine itself
stores whatever it is given.
"""

import json
import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from ..core.errors import ConfigError
from ..knowledge.base import KnowledgeBase


@dataclass
class RelationSpec:
    """One directed edge: name(from_fact, to_fact) with a strength in [0, 1]."""

    name: str
    from_fact: str
    to_fact: str
    strength: float = 1.0

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ConfigError(f"Relation name must be a non-empty string, got {self.name!r}")
        if isinstance(self.strength, bool) or not isinstance(self.strength, numbers.Real):
            raise ConfigError(f"Strength must be a number, got {self.strength!r}")
        if not 0.0 <= self.strength <= 1.0:
            raise ConfigError(
                f"Strength for {self.name}({self.from_fact}, {self.to_fact}) "
                f"must be in [0.0, 1.0], got {self.strength}"
            )
        self.strength = float(self.strength)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "RelationSpec":
        if not isinstance(raw, dict):
            raise ConfigError(f"Relation entry must be a mapping, got {raw!r}")
        missing = [k for k in ("name", "from", "to") if k not in raw]
        if missing:
            raise ConfigError(f"Relation entry {raw!r} is missing {missing}")
        return cls(
            name=raw["name"],
            from_fact=raw["from"],
            to_fact=raw["to"],
            strength=raw.get("strength", 1.0),
        )


@dataclass
class KnowledgeBaseConfig:
    """Fact vocabulary plus the edges to load into it."""

    facts: List[str]
    relations: List[RelationSpec] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "KnowledgeBaseConfig":
        if not isinstance(raw, dict):
            raise ConfigError(f"Expected a mapping, got {type(raw).__name__}")
        if "facts" not in raw:
            raise ConfigError("Knowledge base definition is missing 'facts'")

        facts = raw["facts"]
        if not isinstance(facts, list) or not all(isinstance(f, str) for f in facts):
            raise ConfigError("'facts' must be a list of strings")

        raw_relations = raw.get("relations", [])
        if not isinstance(raw_relations, list):
            raise ConfigError("'relations' must be a list of relation entries")

        relations = [RelationSpec.from_dict(r) for r in raw_relations]
        return cls(facts=list(facts), relations=relations)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "KnowledgeBaseConfig":
        """Load a definition from a JSON file."""
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except UnicodeDecodeError as e:
            raise ConfigError(f"{path}: not UTF-8 text ({e})") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON ({e})") from e
        return cls.from_dict(raw)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "facts": list(self.facts),
            "relations": [
                {"name": r.name, "from": r.from_fact, "to": r.to_fact, "strength": r.strength}
                for r in self.relations
            ],
        }

    def build(self) -> KnowledgeBase:
        """Create the knowledge base and add every relation in order."""
        kb = KnowledgeBase(self.facts)
        for r in self.relations:
            kb.add_relation(r.name, r.from_fact, r.to_fact, r.strength)
        return kb
