"""Closed vocabularies of the NCBI taxonomy dump: ranks and name types."""

from enum import Enum, IntEnum
from typing import Dict, Optional

from taxcanon.models.errors import UnknownRankError, UnknownNameTypeError

class Rank(Enum):
    """Every rank label used in nodes.dmp."""
    ACELLULAR_ROOT = "acellular root"
    BIOTYPE = "biotype"
    CELLULAR_ROOT = "cellular root"
    CLADE = "clade"
    CLASS = "class"
    COHORT = "cohort"
    DOMAIN = "domain"
    FAMILY = "family"
    FORMA = "forma"
    FORMA_SPECIALIS = "forma specialis"
    GENOTYPE = "genotype"
    GENUS = "genus"
    INFRACLASS = "infraclass"
    INFRAORDER = "infraorder"
    ISOLATE = "isolate"
    KINGDOM = "kingdom"
    MORPH = "morph"
    NO_RANK = "no rank"
    ORDER = "order"
    PARVORDER = "parvorder"
    PATHOGROUP = "pathogroup"
    PHYLUM = "phylum"
    REALM = "realm"
    SECTION = "section"
    SERIES = "series"
    SEROGROUP = "serogroup"
    SEROTYPE = "serotype"
    SPECIES = "species"
    SPECIES_GROUP = "species group"
    SPECIES_SUBGROUP = "species subgroup"
    STRAIN = "strain"
    SUBCLASS = "subclass"
    SUBCOHORT = "subcohort"
    SUBFAMILY = "subfamily"
    SUBGENUS = "subgenus"
    SUBKINGDOM = "subkingdom"
    SUBORDER = "suborder"
    SUBPHYLUM = "subphylum"
    SUBSECTION = "subsection"
    SUBSPECIES = "subspecies"
    SUBTRIBE = "subtribe"
    SUBVARIETY = "subvariety"
    SUPERCLASS = "superclass"
    SUPERFAMILY = "superfamily"
    SUPERORDER = "superorder"
    SUPERPHYLUM = "superphylum"
    TRIBE = "tribe"
    VARIETAS = "varietas"

    @property
    def label(self) -> str:
        """Rank as written to the output table, e.g. 'species_group'."""
        return self.value.replace(" ", "_")

class NameType(IntEnum):
    """Name classes of names.dmp, ordered from worst to best."""
    IN_PART = 0
    ACRONYM = 1
    TYPE_MATERIAL = 2
    BLAST_NAME = 3
    INCLUDES = 4
    SYNONYM = 5
    AUTHORITY = 6
    GENBANK_ACRONYM = 7
    EQUIVALENT_NAME = 8
    GENBANK_COMMON_NAME = 9
    COMMON_NAME = 10
    SCIENTIFIC_NAME = 11

    @property
    def text(self) -> str:
        """Name class as written in names.dmp."""
        return _NAME_TYPE_TEXT[self]

_NAME_TYPE_TEXT: Dict[NameType, str] = {
    NameType.IN_PART: "in-part",
    NameType.ACRONYM: "acronym",
    NameType.TYPE_MATERIAL: "type material",
    NameType.BLAST_NAME: "blast name",
    NameType.INCLUDES: "includes",
    NameType.SYNONYM: "synonym",
    NameType.AUTHORITY: "authority",
    NameType.GENBANK_ACRONYM: "genbank acronym",
    NameType.EQUIVALENT_NAME: "equivalent name",
    NameType.GENBANK_COMMON_NAME: "genbank common name",
    NameType.COMMON_NAME: "common name",
    NameType.SCIENTIFIC_NAME: "scientific name",
}

_RANK_BY_TEXT: Dict[str, Rank] = {rank.value: rank for rank in Rank}
_NAME_TYPE_BY_TEXT: Dict[str, NameType] = {text: nt for nt, text in _NAME_TYPE_TEXT.items()}

# The seven ranks kept in the output, numbered from the bottom of the ladder
CANONICAL_LADDER: Dict[Rank, int] = {
    Rank.SPECIES: 1,
    Rank.GENUS: 2,
    Rank.FAMILY: 3,
    Rank.ORDER: 4,
    Rank.CLASS: 5,
    Rank.PHYLUM: 6,
    Rank.DOMAIN: 7,
}

# Position of the root taxon, one step above domain
ROOT_LADDER_POSITION = 8

def parse_rank(text: str) -> Rank:
    """
    Parse a rank label from nodes.dmp.

    Args:
        text: Rank label, e.g. 'species' or 'no rank'

    Returns:
        Matching Rank

    Raises:
        UnknownRankError: If the label is not a known rank
    """
    try:
        return _RANK_BY_TEXT[text]
    except KeyError:
        raise UnknownRankError(f"Could not parse as rank: \"{text}\"")

def parse_name_type(text: str) -> NameType:
    """
    Parse a name class from names.dmp.

    Args:
        text: Name class, e.g. 'scientific name'

    Returns:
        Matching NameType

    Raises:
        UnknownNameTypeError: If the name class is not known
    """
    try:
        return _NAME_TYPE_BY_TEXT[text]
    except KeyError:
        raise UnknownNameTypeError(f"Could not parse as name type: \"{text}\"")

def ladder_position(rank: Rank) -> Optional[int]:
    """Position of rank on the canonical ladder, or None for non-canonical ranks."""
    return CANONICAL_LADDER.get(rank)
