"""File writers for taxcanon."""

import logging
from pathlib import Path

import pandas as pd

from taxcanon.models.errors import InputError
from taxcanon.core.utils import OUTPUT_COLUMNS, OUTPUT_SEPARATOR

logger = logging.getLogger(__name__)

def write(table_df: pd.DataFrame) -> bytes:
    """
    Serialize the taxonomy table to tab-separated text.

    Values are written verbatim without quoting, so names must already be
    free of tabs.

    Args:
        table_df: Table from assemble_table

    Returns:
        UTF-8 encoded header line followed by one line per row
    """
    dummy_str = OUTPUT_SEPARATOR.join(['%s'] * len(OUTPUT_COLUMNS)) + '\n'
    lines = [dummy_str % tuple(OUTPUT_COLUMNS)]
    for row in table_df[OUTPUT_COLUMNS].itertuples(index=False, name=None):
        lines.append(dummy_str % row)
    return ''.join(lines).encode('utf-8')

def write_table(table_df: pd.DataFrame, filepath: Path) -> None:
    """
    Write the taxonomy table to filepath.

    Args:
        table_df: Table from assemble_table
        filepath: Path to output .tsv file

    Raises:
        InputError: If the output file can't be written
    """
    try:
        with open(filepath, 'xb') as file:
            file.write(write(table_df))
    except OSError as e:
        raise InputError(f"Error writing taxonomy table: {str(e)}")
    logger.info(f"Wrote {len(table_df)} taxa to {filepath}")
