"""Taxonomy tree restructuring.

Every function here takes a child -> parent relation keyed by tax id and
returns a new relation; the input is never modified. The root is never a key.
"""

import logging
from typing import Dict, List, Mapping, AbstractSet

from taxcanon.models.errors import TaxonomyError, LineageError
from taxcanon.models.taxonomic import Node
from taxcanon.core.utils import ROOT_TAX_ID
from taxcanon.core.vocabulary import Rank, ladder_position, ROOT_LADDER_POSITION

logger = logging.getLogger(__name__)

def build_parent_dict(
    nodes: Mapping[int, Node],
    root_id: int = ROOT_TAX_ID
) -> Dict[int, int]:
    """
    Build the raw child -> parent relation from parsed nodes.

    Args:
        nodes: Nodes keyed by tax id
        root_id: Tax id of the root, which gets no parent

    Returns:
        Dict mapping each non-root tax id to its parent tax id

    Raises:
        TaxonomyError: If a node refers to a parent that is not in the dump
    """
    parent_of = {}
    for tax_id, node in nodes.items():
        if tax_id == root_id:
            continue
        if node.parent_id not in nodes:
            raise TaxonomyError(f"Taxid:{tax_id} has parent {node.parent_id} which is not in nodes file")
        parent_of[tax_id] = node.parent_id
    return parent_of

def remove_descendants(
    parent_of: Mapping[int, int],
    to_remove: AbstractSet[int],
    root_id: int = ROOT_TAX_ID
) -> Dict[int, int]:
    """
    Remove all nodes in to_remove together with their descendants.

    Args:
        parent_of: Child -> parent relation
        to_remove: Tax ids whose whole subtree should go
        root_id: Tax id of the root

    Returns:
        Relation without the removed subtrees

    Raises:
        TaxonomyError: If a lineage is broken before reaching the root
    """
    result = {}
    for child, parent in parent_of.items():
        should_add = True
        current_id = child
        while current_id != root_id:
            if current_id in to_remove:
                should_add = False
                break
            try:
                current_id = parent_of[current_id]
            except KeyError:
                raise TaxonomyError(f"Lineage of taxid:{child} is broken at taxid:{current_id}")
        if should_add:
            result[child] = parent

    logger.info(f"Removed {len(parent_of) - len(result)} nodes below {len(to_remove)} excluded taxa")
    return result

def make_parent_canonical(
    parent_of: Mapping[int, int],
    ranks: Mapping[int, Rank],
    root_id: int = ROOT_TAX_ID
) -> Dict[int, int]:
    """
    Change each parent to its closest ancestor with a canonical rank.

    Many entries are partially unranked, e.g. a genus below an unlabeled
    clade below a known family. Intermediate non-canonical clades are skipped
    so that every parent is either the root or a canonical clade.

    A canonical child whose closest canonical ancestor is not exactly one
    ladder step above it (e.g. a species directly under a family) is dropped.
    Non-canonical children are always kept.

    Args:
        parent_of: Child -> parent relation
        ranks: Rank of every tax id in the relation
        root_id: Tax id of the root

    Returns:
        Relation whose parents are all canonical or the root

    Raises:
        LineageError: If a canonical node's closest canonical ancestor has the same rank
        TaxonomyError: If a lineage is broken before reaching a canonical ancestor
    """
    new_parents = {}
    for child, parent in parent_of.items():
        new_parent = parent
        parent_index = None if new_parent == root_id else ladder_position(ranks[new_parent])
        while new_parent != root_id and parent_index is None:
            try:
                new_parent = parent_of[new_parent]
            except KeyError:
                raise TaxonomyError(f"Lineage of taxid:{child} is broken at taxid:{new_parent}")
            parent_index = None if new_parent == root_id else ladder_position(ranks[new_parent])

        # The root stands for all life
        if new_parent == root_id:
            parent_index = ROOT_LADDER_POSITION
        elif ranks[child] == ranks[new_parent]:
            raise LineageError(
                f"Taxid:{child} has closest canonical ancestor {new_parent} "
                f"of the same rank '{ranks[child].value}'"
            )

        child_index = ladder_position(ranks[child])
        if child_index is None or child_index == parent_index - 1:
            new_parents[child] = new_parent
        else:
            logger.debug(f"Dropping taxid:{child} ({ranks[child].value}), closest canonical ancestor is {new_parent}")

    logger.info(f"Kept {len(new_parents)} of {len(parent_of)} nodes after collapsing to canonical ranks")
    return new_parents

def remove_holey_descendants(
    parent_of: Mapping[int, int],
    root_id: int = ROOT_TAX_ID
) -> Dict[int, int]:
    """
    Remove any nodes that can't be traced to the root through the relation.

    The tree is traversed from the root down and only reached nodes are kept.

    Args:
        parent_of: Child -> parent relation
        root_id: Tax id of the root

    Returns:
        Relation forming a single tree under the root
    """
    children_of: Dict[int, List[int]] = {}
    for child, parent in parent_of.items():
        children_of.setdefault(parent, []).append(child)

    new_parents = {}
    stack = [root_id]
    while stack:
        parent = stack.pop()
        for child in children_of.get(parent, []):
            new_parents[child] = parent
            stack.append(child)

    logger.info(f"Removed {len(parent_of) - len(new_parents)} nodes disconnected from the root")
    return new_parents

