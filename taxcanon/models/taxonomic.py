"""Data models for taxonomy."""

from typing import Dict, Mapping
from dataclasses import dataclass

from taxcanon.core.vocabulary import Rank, NameType

@dataclass(frozen=True)
class Node:
    """A single record of nodes.dmp."""
    tax_id: int
    parent_id: int
    rank: Rank

@dataclass(frozen=True)
class NameCandidate:
    """One name offered by names.dmp for a tax id."""
    tax_id: int
    name_type: NameType
    text: str

@dataclass(frozen=True)
class ResolvedName:
    """The single name chosen for a tax id."""
    name_type: NameType
    text: str

@dataclass(frozen=True)
class OutputRow:
    """Represents a row of the output taxonomy table."""
    child_id: int
    child_rank: Rank
    parent_id: int
    name: str

    def as_tuple(self) -> tuple:
        """Convert to the tuple of output fields."""
        return (self.child_id, self.child_rank.label, self.parent_id, self.name)

@dataclass(frozen=True)
class TaxonomyDump:
    """Parsed contents of nodes.dmp."""
    nodes: Mapping[int, Node]
    parent_of: Mapping[int, int]

    @property
    def ranks(self) -> Dict[int, Rank]:
        """Rank of every parsed node, keyed by tax id."""
        return {tax_id: node.rank for tax_id, node in self.nodes.items()}
