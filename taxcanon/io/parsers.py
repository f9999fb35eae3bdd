"""File format parsers for NCBI taxonomy dumps."""

import gzip
import logging
from contextlib import nullcontext
from pathlib import Path
from typing import List, Dict, Optional, Union, AbstractSet, TextIO
from abc import ABC, abstractmethod

import pandas as pd

from taxcanon.models.errors import InputError, DuplicateNodeError
from taxcanon.models.taxonomic import Node, NameCandidate, TaxonomyDump
from taxcanon.core.taxonomy import build_parent_dict
from taxcanon.core.utils import DUMP_FIELD_DELIMITER, DUMP_LINE_SUFFIX, ROOT_TAX_ID
from taxcanon.core.vocabulary import parse_rank, parse_name_type

logger = logging.getLogger(__name__)

DumpSource = Union[str, Path, TextIO]

def _open_dump(source: DumpSource):
    """Open a path, gzipped or not, as text; pass open streams through."""
    if not isinstance(source, (str, Path)):
        return nullcontext(source)
    if str(source).endswith(".gz"):
        return gzip.open(source, "rt", encoding="utf-8")
    return open(source, "r", encoding="utf-8")

def read_dump(source: DumpSource, n_fields: int) -> pd.DataFrame:
    """
    Read a '\\t|\\t' delimited .dmp file into a DataFrame of strings.

    The trailing '\\t|' of every line is removed and lines left blank are
    skipped. Lines may carry more fields than needed; only the first
    n_fields are returned.

    Args:
        source: Path to a .dmp file (optionally gzipped) or an open text stream
        n_fields: Number of leading fields to keep

    Returns:
        DataFrame with integer column labels 0..n_fields-1

    Raises:
        InputError: If the file can't be read or a line has too few fields
    """
    rows = []
    try:
        with _open_dump(source) as file:
            for line_number, line in enumerate(file, start=1):
                line = line.rstrip().removesuffix(DUMP_LINE_SUFFIX)
                if not line:
                    continue
                fields = line.split(DUMP_FIELD_DELIMITER)
                if len(fields) < n_fields:
                    raise InputError(
                        f"Expected at least {n_fields} fields per line, found {len(fields)} on line {line_number}"
                    )
                rows.append(fields[:n_fields])
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Error reading dump file: {str(e)}")

    return pd.DataFrame(rows, columns=range(n_fields), dtype=str)

def _parse_tax_ids(column: pd.Series) -> pd.Series:
    try:
        return column.str.strip().astype(int)
    except ValueError as e:
        raise InputError(f"Invalid tax id in dump file: {str(e)}")

class Parser(ABC):
    """Base parser class for the dump files."""

    @abstractmethod
    def parse(self, source: DumpSource):
        """Parse the dump at the given source.

        Args:
            source: Path or open text stream

        Returns:
            Parsed data
        """
        pass

class NodesParser(Parser):
    """Parser for nodes.dmp."""

    def parse(self, source: DumpSource) -> Dict[int, Node]:
        """Parse nodes.dmp into Nodes keyed by tax id.

        Args:
            source: Path to nodes.dmp or open text stream

        Returns:
            Dictionary mapping tax id to Node

        Raises:
            InputError: If a line can't be parsed
            DuplicateNodeError: If a tax id occurs more than once
            UnknownRankError: If a rank label is not known
        """
        nodes_df = read_dump(source, 3)
        tax_ids = _parse_tax_ids(nodes_df[0])
        parent_ids = _parse_tax_ids(nodes_df[1])

        duplicated = tax_ids[tax_ids.duplicated()]
        if not duplicated.empty:
            raise DuplicateNodeError(f"Duplicate tax id in nodes file: {duplicated.iloc[0]}")

        # Parse each distinct label once; raises on the first unknown rank
        rank_lookup = {text: parse_rank(text) for text in nodes_df[2].unique()}

        nodes = {
            tax_id: Node(tax_id, parent_id, rank_lookup[rank_text])
            for tax_id, parent_id, rank_text in zip(tax_ids, parent_ids, nodes_df[2])
        }
        logger.info(f"Parsed {len(nodes)} nodes")
        return nodes

class NamesParser(Parser):
    """Parser for names.dmp."""

    def parse(
        self,
        source: DumpSource,
        tax_ids: Optional[AbstractSet[int]] = None
    ) -> Dict[int, List[NameCandidate]]:
        """Parse names.dmp into name candidates per tax id.

        names.dmp holds a non-unique and a unique name per record; the unique
        name is empty when the name is already unique, otherwise it is used.
        A tax id usually has several records, e.g. "human" and "Homo sapiens".

        Args:
            source: Path to names.dmp or open text stream
            tax_ids: If given, only names of these tax ids are kept

        Returns:
            Dictionary mapping tax id to its candidates in file order

        Raises:
            InputError: If a line can't be parsed
            UnknownNameTypeError: If a name class is not known
        """
        names_df = read_dump(source, 4)
        ids = _parse_tax_ids(names_df[0])
        if tax_ids is not None:
            keep = ids.isin(tax_ids)
            names_df = names_df[keep]
            ids = ids[keep]

        texts = names_df[2].where(names_df[2] != "", names_df[1])
        name_type_lookup = {text: parse_name_type(text) for text in names_df[3].unique()}

        names: Dict[int, List[NameCandidate]] = {}
        for tax_id, text, class_text in zip(ids, texts, names_df[3]):
            names.setdefault(tax_id, []).append(
                NameCandidate(tax_id, name_type_lookup[class_text], text)
            )
        logger.info(f"Parsed {len(ids)} names for {len(names)} tax ids")
        return names

# Factory function to get appropriate parser
def get_parser(file_type: str) -> Parser:
    """Get appropriate parser for file type.

    Args:
        file_type: 'nodes' or 'names'

    Returns:
        Parser object

    Raises:
        InputError: If the file type is not known
    """
    parsers = {
        'nodes': NodesParser,
        'names': NamesParser
    }
    if file_type not in parsers:
        raise InputError(f"Unknown dump file type: {file_type}")
    return parsers[file_type]()

def parse_nodes(source: DumpSource) -> Dict[int, Node]:
    """Parse nodes.dmp. Wrapper for NodesParser."""
    return NodesParser().parse(source)

def parse_names(
    source: DumpSource,
    tax_ids: Optional[AbstractSet[int]] = None
) -> Dict[int, List[NameCandidate]]:
    """Parse names.dmp. Wrapper for NamesParser."""
    return NamesParser().parse(source, tax_ids)

def parse_dump(nodes_source: DumpSource, root_id: int = ROOT_TAX_ID) -> TaxonomyDump:
    """
    Parse nodes.dmp into nodes and the raw parent relation.

    Args:
        nodes_source: Path or stream of nodes.dmp
        root_id: Tax id of the root

    Returns:
        TaxonomyDump with nodes and raw parent relation
    """
    nodes = parse_nodes(nodes_source)
    parent_of = build_parent_dict(nodes, root_id)
    return TaxonomyDump(nodes=nodes, parent_of=parent_of)
