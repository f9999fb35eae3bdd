"""Utility functions for taxcanon."""

import logging

# Static global variables
ROOT_TAX_ID = 1
BACTERIA_TAX_ID = 2
ENVIRONMENTAL_SAMPLES_TAX_ID = 57727
DEFAULT_BLACKLIST = frozenset([ENVIRONMENTAL_SAMPLES_TAX_ID])

DUMP_FIELD_DELIMITER = "\t|\t"
DUMP_LINE_SUFFIX = "\t|"
OUTPUT_SEPARATOR = "\t"
OUTPUT_COLUMNS = ['child_id', 'child_rank', 'parent_id', 'name']

def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the taxcanon application.

    Args:
        verbose: Whether to enable verbose (DEBUG) logging

    Returns:
        Logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger('taxcanon')
