"""Configuration management for taxcanon."""

import os
from pathlib import Path
from typing import Optional, Any, FrozenSet

from taxcanon.models.errors import TaxCanonError
from taxcanon.core.utils import DEFAULT_BLACKLIST

class ConfigError(TaxCanonError):
    """Raised when there's an issue with configuration."""
    pass

def parse_taxid_list(value: str) -> FrozenSet[int]:
    """Parse a comma-separated list of tax ids, e.g. '57727,12908'."""
    try:
        return frozenset(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise ConfigError(f"Invalid tax id list: \"{value}\"")

class TaxCanonConfig:
    """Centralized configuration for taxcanon."""

    def __init__(self, args: Optional[Any] = None):
        """
        Initialize configuration from args and environment.

        Args:
            args: Arguments from argparse

        Raises:
            ConfigError: If the configuration is invalid
        """
        self.verbose = getattr(args, 'verbose', False)

        self.output_path = Path(getattr(args, 'outfile', None) or 'taxonomy.tsv')
        self.names_path = Path(getattr(args, 'names', None) or 'names.dmp')
        self.nodes_path = Path(getattr(args, 'nodes', None) or 'nodes.dmp')

        # Excluded clades: the defaults, extended by environment and arguments
        blacklist = set(DEFAULT_BLACKLIST)
        blacklist |= parse_taxid_list(os.environ.get("TAXCANON_EXCLUDE", ""))
        blacklist |= set(getattr(args, 'exclude_taxid', None) or [])
        self.blacklist = frozenset(blacklist)
