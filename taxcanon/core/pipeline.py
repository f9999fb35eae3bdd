"""Build the canonical taxonomy table from NCBI dumps."""

import logging
from typing import Mapping, Optional, AbstractSet

import pandas as pd

from taxcanon.models.taxonomic import ResolvedName
from taxcanon.core.names import resolve_names, validate_names
from taxcanon.core.table import assemble_table
from taxcanon.core.taxonomy import (
    remove_descendants, make_parent_canonical, remove_holey_descendants
)
from taxcanon.core.utils import DEFAULT_BLACKLIST, ROOT_TAX_ID
from taxcanon.io.parsers import DumpSource, parse_dump, parse_names

logger = logging.getLogger(__name__)

def build(
    nodes_source: DumpSource,
    names_source: DumpSource,
    blacklist: AbstractSet[int] = DEFAULT_BLACKLIST,
    overrides: Optional[Mapping[int, ResolvedName]] = None,
    root_id: int = ROOT_TAX_ID
) -> pd.DataFrame:
    """
    Run the whole pipeline on a nodes.dmp / names.dmp pair.

    1. Remove the blacklisted clades and everything below them
    2. Reattach every node to its closest canonical ancestor, dropping
       canonical nodes with a skipped rank in their lineage
    3. Remove nodes no longer connected to the root
    4. Resolve and check one name per remaining node

    Args:
        nodes_source: Path or stream of nodes.dmp
        names_source: Path or stream of names.dmp
        blacklist: Tax ids whose subtrees are removed
        overrides: Fixed names per tax id, defaults to NAME_OVERRIDES
        root_id: Tax id of the root

    Returns:
        Output table sorted by name
    """
    dump = parse_dump(nodes_source, root_id=root_id)
    ranks = dump.ranks

    parent_of = remove_descendants(dump.parent_of, blacklist, root_id)
    parent_of = make_parent_canonical(parent_of, ranks, root_id)
    parent_of = remove_holey_descendants(parent_of, root_id)

    # Names are only read for the nodes that made it this far
    candidates = parse_names(names_source, set(parent_of))
    names = resolve_names(candidates, parent_of.keys(), overrides)
    validate_names(names)

    return assemble_table(parent_of, ranks, names)
