"""Write-time checks shared by the SBOL core entities."""

# purpose: enforce alphabet, coordinate, identifier and membership policies on mutation
# status: active
# depends_on: Bio.Data.IUPACData, sbolcore.config
# related_docs: SPEC_FULL.md

from __future__ import annotations

import re
from typing import Any, MutableSequence, TypeVar

from Bio.Data import IUPACData

from ..config import get_settings
from ..errors import DuplicateMember, InvalidDisplayId, InvalidNucleotides, InvalidRange
from ..utils.logging import get_logger

T = TypeVar("T")

IUPAC_DNA_LETTERS = frozenset(IUPACData.ambiguous_dna_letters)
_DISPLAY_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def check_nucleotides(text: str | None) -> str | None:
    """Return the nucleotide text untouched after alphabet validation."""

    # purpose: reject whitespace, control characters and non-IUPAC symbols at write time
    # inputs: raw nucleotide text or None
    # outputs: the same text, never case-folded
    if text is None or not get_settings().validate_nucleotides:
        return text
    invalid = sorted({char for char in text if char.upper() not in IUPAC_DNA_LETTERS})
    if invalid:
        raise InvalidNucleotides(invalid)
    return text


def check_coordinate(value: Any, label: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} coordinate must be an int, got {type(value).__name__}")
    return value


def check_range(start: int | None, end: int | None) -> None:
    """Validate 1-based inclusive coordinates; a half-set range is allowed."""

    for value in (start, end):
        if value is not None and value < 1:
            raise InvalidRange(start, end, "coordinates are 1-based and must be positive")
    if start is not None and end is not None and start > end:
        raise InvalidRange(start, end)


def check_display_id(value: str | None) -> str | None:
    if value is None or not get_settings().strict_display_id:
        return value
    if not _DISPLAY_ID.match(value):
        raise InvalidDisplayId(value)
    return value


def add_unique(members: MutableSequence[T], member: T, *, container: str) -> bool:
    """Append ``member`` unless a value-equal entry is already present."""

    # purpose: single insertion path for every set-valued relation
    # inputs: backing list, candidate member, container label for diagnostics
    # outputs: True when the member was appended, False when ignored as duplicate
    if member in members:
        if get_settings().reject_duplicates:
            raise DuplicateMember(container, member)
        get_logger("validation").debug("ignoring duplicate member in %s", container)
        return False
    members.append(member)
    return True
