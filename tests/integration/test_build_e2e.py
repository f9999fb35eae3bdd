"""End-to-end tests running build/write and the CLI on small dumps."""

from __future__ import annotations

from pathlib import Path

import pytest

from taxcanon import build, write
from taxcanon.cli import main
from taxcanon.core.vocabulary import ROOT_LADDER_POSITION, ladder_position, parse_rank
from taxcanon.models.errors import DuplicateNameError

EXPECTED_LINES = [
    "child_id\tchild_rank\tparent_id\tname",
    "2\tdomain\t1\tBacteria",
    "91347\torder\t1236\tEnterobacterales",
    "543\tfamily\t91347\tEnterobacteriaceae",
    "561\tgenus\t543\tEscherichia",
    "562\tspecies\t561\tEscherichia coli",
    "83333\tstrain\t562\tEscherichia coli K-12",
    "1236\tclass\t1224\tGammaproteobacteria",
    "2001\tgenus\t543\tGenusx",
    "2002\tspecies\t2001\tGenusx alpha",
    "1224\tphylum\t2\tPseudomonadota",
    "2000\tsubfamily\t543\tSubfamilyinae",
    "131567\tcellular_root\t1\tcellular organisms",
]


def test_build_and_write_ecoli_dump(ecoli_dumps) -> None:
    nodes, names = ecoli_dumps

    output = write(build(nodes, names)).decode("utf-8")

    assert output.splitlines() == EXPECTED_LINES


def test_build_output_invariants(ecoli_dumps) -> None:
    nodes, names = ecoli_dumps

    table_df = build(nodes, names)

    parent_of = dict(zip(table_df["child_id"], table_df["parent_id"]))
    ranks = {
        child: parse_rank(label.replace("_", " "))
        for child, label in zip(table_df["child_id"], table_df["child_rank"])
    }

    # excluded clade and its descendants are gone, as are incomplete lineages
    assert not {57727, 999001, 1300, 1301} & set(parent_of)
    assert 1 not in parent_of

    # every row reaches the root
    for child in parent_of:
        current, steps = child, 0
        while current != 1:
            current = parent_of[current]
            steps += 1
            assert steps <= len(parent_of)

    # canonical rows sit one ladder step below their parent
    for child, parent in parent_of.items():
        child_index = ladder_position(ranks[child])
        if child_index is not None:
            parent_index = ROOT_LADDER_POSITION if parent == 1 else ladder_position(ranks[parent])
            assert parent_index == child_index + 1

    assert table_df["name"].is_unique
    assert not table_df["name"].str.contains("\t").any()


def test_build_with_extra_blacklist_removes_subtree(ecoli_dumps) -> None:
    nodes, names = ecoli_dumps

    table_df = build(nodes, names, blacklist={57727, 2000})

    assert 2000 not in set(table_df["child_id"])
    assert {2001, 2002}.isdisjoint(set(table_df["child_id"]))
    assert 562 in set(table_df["child_id"])


def test_build_fails_on_duplicate_scientific_names(nodes_dump, names_dump) -> None:
    nodes = nodes_dump([(1, 1, "no rank"), (10, 1, "no rank"), (11, 1, "clade")])
    names = names_dump(
        [
            (10, "Escherichia coli", "", "scientific name"),
            (11, "Escherichia coli", "", "scientific name"),
        ]
    )

    with pytest.raises(DuplicateNameError, match="taxid:10 and taxid:11"):
        build(nodes, names)


def test_cli_writes_table(tmp_path: Path, write_dump_files) -> None:
    names_path, nodes_path = write_dump_files()
    output = tmp_path / "taxonomy.tsv"

    exit_code = main([str(output), str(names_path), str(nodes_path)])

    assert exit_code == 0
    assert output.read_text(encoding="utf-8").splitlines() == EXPECTED_LINES


def test_cli_refuses_existing_output(tmp_path: Path, write_dump_files) -> None:
    names_path, nodes_path = write_dump_files()
    output = tmp_path / "taxonomy.tsv"
    output.write_text("keep me", encoding="utf-8")

    exit_code = main([str(output), str(names_path), str(nodes_path)])

    assert exit_code == 1
    assert output.read_text(encoding="utf-8") == "keep me"


def test_cli_reports_missing_input(tmp_path: Path) -> None:
    output = tmp_path / "taxonomy.tsv"

    exit_code = main([str(output), str(tmp_path / "names.dmp"), str(tmp_path / "nodes.dmp")])

    assert exit_code == 1
    assert not output.exists()


def test_cli_exclude_taxid_option(tmp_path: Path, write_dump_files) -> None:
    names_path, nodes_path = write_dump_files()
    output = tmp_path / "taxonomy.tsv"

    exit_code = main(["--exclude-taxid", "2000", str(output), str(names_path), str(nodes_path)])

    assert exit_code == 0
    assert "Subfamilyinae" not in output.read_text(encoding="utf-8")
