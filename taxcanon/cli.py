#!/usr/bin/env python3
"""Command-line interface for taxcanon."""

import sys
import argparse
import logging
from typing import List, Optional

from taxcanon import __version__
from taxcanon.core.utils import setup_logging, DEFAULT_BLACKLIST
from taxcanon.models.config import TaxCanonConfig, ConfigError
from taxcanon.models.errors import TaxCanonError, InputError

logger = logging.getLogger(__name__)

def create_parser() -> argparse.ArgumentParser:
    """
    Create and return the argument parser for taxcanon.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="taxcanon: build a canonical-rank taxonomy table from NCBI names.dmp and nodes.dmp",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        '--version', '-v',
        action='version',
        version=f'%(prog)s v{__version__}'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        'outfile',
        type=str,
        help='path of output taxonomy .tsv, must not exist'
    )
    parser.add_argument(
        'names',
        type=str,
        help='path to NCBI names.dmp'
    )
    parser.add_argument(
        'nodes',
        type=str,
        help='path to NCBI nodes.dmp'
    )
    parser.add_argument(
        '--exclude-taxid',
        type=int,
        action='append',
        default=[],
        help=f'also remove this taxid and its descendants, always removed: {sorted(DEFAULT_BLACKLIST)}'
    )
    return parser

def validate_paths(config: TaxCanonConfig) -> None:
    """
    Check the paths before any work is done.

    Args:
        config: Configuration with input and output paths

    Raises:
        ConfigError: If the output path already exists
        InputError: If an input file cannot be found
    """
    if config.output_path.exists():
        raise ConfigError(f"Outpath exists: \"{config.output_path}\"")
    for input_path in (config.names_path, config.nodes_path):
        if not input_path.is_file():
            raise InputError(f"No such file: \"{input_path}\"")

def run(config: TaxCanonConfig) -> None:
    """
    Build the taxonomy table and write it to the output path.

    Args:
        config: Configuration for the run
    """
    from taxcanon.core.pipeline import build
    from taxcanon.io.writers import write_table

    validate_paths(config)
    logger.info(f"Building taxonomy from {config.nodes_path} and {config.names_path}")
    table_df = build(config.nodes_path, config.names_path, config.blacklist)
    write_table(table_df, config.output_path)

def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the taxcanon command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.verbose)

    try:
        config = TaxCanonConfig(args)
        run(config)
        return 0

    except TaxCanonError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
