"""Choosing one name per tax id and checking the chosen names."""

import logging
from typing import List, Dict, Mapping, Iterable, Optional

from taxcanon.models.errors import MissingNameError, NameSeparatorError, DuplicateNameError
from taxcanon.models.taxonomic import NameCandidate, ResolvedName
from taxcanon.core.utils import BACTERIA_TAX_ID, OUTPUT_SEPARATOR
from taxcanon.core.vocabulary import NameType

logger = logging.getLogger(__name__)

# names.dmp calls this "Bacteria <bacteria>"
NAME_OVERRIDES: Dict[int, ResolvedName] = {
    BACTERIA_TAX_ID: ResolvedName(NameType.SCIENTIFIC_NAME, "Bacteria"),
}

def best_name(candidates: List[NameCandidate]) -> ResolvedName:
    """
    Pick the candidate with the best name type.

    E.g. "Opacifrons coxata" (scientific name) wins over
    "Opacifrons coxata (Stenhammar, 1854)" (authority). On equal name types
    the first candidate wins.
    """
    best = max(candidates, key=lambda candidate: candidate.name_type)
    return ResolvedName(best.name_type, best.text)

def resolve_names(
    candidates: Mapping[int, List[NameCandidate]],
    tax_ids: Iterable[int],
    overrides: Optional[Mapping[int, ResolvedName]] = None
) -> Dict[int, ResolvedName]:
    """
    Resolve a single name for each tax id.

    Args:
        candidates: Name candidates per tax id, in file order
        tax_ids: Tax ids that need a name
        overrides: Fixed names replacing whatever the dump offers

    Returns:
        Dictionary mapping tax id to its resolved name

    Raises:
        MissingNameError: If a tax id has neither candidates nor an override
    """
    if overrides is None:
        overrides = NAME_OVERRIDES

    resolved = {}
    for tax_id in tax_ids:
        if tax_id in overrides:
            resolved[tax_id] = overrides[tax_id]
        elif candidates.get(tax_id):
            resolved[tax_id] = best_name(candidates[tax_id])
        else:
            raise MissingNameError(f"Taxid:{tax_id} has no name in names file")

    logger.info(f"Resolved names for {len(resolved)} tax ids")
    return resolved

def validate_names(
    resolved: Mapping[int, ResolvedName],
    separator: str = OUTPUT_SEPARATOR
) -> None:
    """
    Check that names can be written to the output table.

    Args:
        resolved: Resolved name per tax id
        separator: Output field separator, which names may not contain

    Raises:
        NameSeparatorError: If a name contains the separator
        DuplicateNameError: If two tax ids share a name
    """
    owner_of: Dict[str, int] = {}
    for tax_id, name in resolved.items():
        if separator in name.text:
            raise NameSeparatorError(f"Cannot have {separator!r} in name, but it is present in \"{name.text}\" (taxid:{tax_id})")
        if name.text in owner_of:
            raise DuplicateNameError(
                f"Name \"{name.text}\" is not unique: taxid:{owner_of[name.text]} and taxid:{tax_id}"
            )
        owner_of[name.text] = tax_id
