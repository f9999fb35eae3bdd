"""Assembly of the output taxonomy table."""

import logging
from typing import Mapping

import pandas as pd

from taxcanon.models.taxonomic import OutputRow, ResolvedName
from taxcanon.core.utils import OUTPUT_COLUMNS
from taxcanon.core.vocabulary import Rank

logger = logging.getLogger(__name__)

def assemble_table(
    parent_of: Mapping[int, int],
    ranks: Mapping[int, Rank],
    names: Mapping[int, ResolvedName]
) -> pd.DataFrame:
    """
    Join the relation with ranks and names into the output table.

    Rows are sorted by name, which makes the written file compress better.

    Args:
        parent_of: Final child -> parent relation
        ranks: Rank of every child
        names: Resolved name of every child

    Returns:
        DataFrame with columns child_id, child_rank, parent_id, name
    """
    rows = [
        OutputRow(child, ranks[child], parent, names[child].text).as_tuple()
        for child, parent in parent_of.items()
    ]
    table_df = pd.DataFrame(rows, columns=OUTPUT_COLUMNS)
    table_df = table_df.sort_values('name', kind='mergesort', ignore_index=True)
    logger.info(f"Assembled table with {len(table_df)} rows")
    return table_df
