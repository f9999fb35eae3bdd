"""Shared fixtures building small NCBI-style dump files."""

from __future__ import annotations

import io
from typing import Callable, Iterable, Tuple

import pytest

NodeRecord = Tuple[int, int, str]
NameRecord = Tuple[int, str, str, str]


def _nodes_text(records: Iterable[NodeRecord]) -> str:
    # nodes.dmp carries more columns than the parser uses
    return "".join(
        f"{tax_id}\t|\t{parent_id}\t|\t{rank}\t|\t\t|\t0\t|\n"
        for tax_id, parent_id, rank in records
    )


def _names_text(records: Iterable[NameRecord]) -> str:
    return "".join(
        f"{tax_id}\t|\t{name}\t|\t{unique_name}\t|\t{name_class}\t|\n"
        for tax_id, name, unique_name, name_class in records
    )


@pytest.fixture
def nodes_dump() -> Callable[[Iterable[NodeRecord]], io.StringIO]:
    """Build an in-memory nodes.dmp from (tax_id, parent_id, rank) records."""

    def _build(records: Iterable[NodeRecord]) -> io.StringIO:
        return io.StringIO(_nodes_text(records))

    return _build


@pytest.fixture
def names_dump() -> Callable[[Iterable[NameRecord]], io.StringIO]:
    """Build an in-memory names.dmp from (tax_id, name, unique_name, class) records."""

    def _build(records: Iterable[NameRecord]) -> io.StringIO:
        return io.StringIO(_names_text(records))

    return _build


ECOLI_NODES = [
    (1, 1, "no rank"),
    (131567, 1, "cellular root"),
    (2, 131567, "domain"),
    (57727, 2, "no rank"),
    (999001, 57727, "species"),
    (1224, 2, "phylum"),
    (1236, 1224, "class"),
    (91347, 1236, "order"),
    (543, 91347, "family"),
    (561, 543, "genus"),
    (562, 561, "species"),
    (83333, 562, "strain"),
    (1300, 543, "species"),
    (1301, 1300, "strain"),
    (2000, 543, "subfamily"),
    (2001, 2000, "genus"),
    (2002, 2001, "species"),
]

ECOLI_NAMES = [
    (1, "root", "", "scientific name"),
    (131567, "cellular organisms", "", "scientific name"),
    (131567, "biota", "", "synonym"),
    (2, "Bacteria", "Bacteria <bacteria>", "scientific name"),
    (2, "eubacteria", "", "genbank common name"),
    (57727, "environmental samples", "environmental samples <Bacteria>", "scientific name"),
    (999001, "uncultured bacterium", "", "scientific name"),
    (1224, "Proteobacteria", "", "synonym"),
    (1224, "Pseudomonadota", "", "scientific name"),
    (1236, "Gammaproteobacteria", "", "scientific name"),
    (91347, "Enterobacterales", "", "scientific name"),
    (543, "Enterobacteriaceae", "", "scientific name"),
    (561, "Escherichia", "", "scientific name"),
    (562, "Bacillus coli", "", "synonym"),
    (562, "E. coli", "", "common name"),
    (562, "Escherichia coli", "", "scientific name"),
    (83333, "Escherichia coli K12", "", "equivalent name"),
    (83333, "Escherichia coli K-12", "", "scientific name"),
    (1300, "Escherichia coli", "", "scientific name"),
    (1301, "Orphan strain", "", "scientific name"),
    (2000, "Subfamilyinae", "", "scientific name"),
    (2001, "Genusx", "", "scientific name"),
    (2002, "Genusx alpha", "", "scientific name"),
    (2002, "Genusx alpha Author, 1901", "", "authority"),
]


@pytest.fixture
def ecoli_dumps(
    nodes_dump: Callable[[Iterable[NodeRecord]], io.StringIO],
    names_dump: Callable[[Iterable[NameRecord]], io.StringIO],
) -> Tuple[io.StringIO, io.StringIO]:
    """nodes.dmp / names.dmp pair around Escherichia coli."""
    return nodes_dump(ECOLI_NODES), names_dump(ECOLI_NAMES)


@pytest.fixture
def write_dump_files(tmp_path):
    """Write the E. coli dumps to tmp_path and return (names_path, nodes_path)."""

    def _write():
        names_path = tmp_path / "names.dmp"
        nodes_path = tmp_path / "nodes.dmp"
        names_path.write_text(_names_text(ECOLI_NAMES), encoding="utf-8")
        nodes_path.write_text(_nodes_text(ECOLI_NODES), encoding="utf-8")
        return names_path, nodes_path

    return _write
