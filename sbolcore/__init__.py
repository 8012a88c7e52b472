"""In-memory SBOL core data model.

Exposes the four core record types (``DnaSequence``, ``DnaComponent``,
``SequenceAnnotation``, ``Collection``) and their error taxonomy. Snapshot and
graph helpers live under ``sbolcore.schemas`` and ``sbolcore.services``.
"""

from __future__ import annotations

from .errors import (
    CyclicContainment,
    DuplicateMember,
    InvalidDisplayId,
    InvalidNucleotides,
    InvalidPrecedence,
    InvalidRange,
    InvalidStrand,
    MissingSequence,
    PrecedenceCycle,
    SBOLError,
)
from .models import Collection, DnaComponent, DnaSequence, SequenceAnnotation, Strand

__all__ = [
    "Collection",
    "CyclicContainment",
    "DnaComponent",
    "DnaSequence",
    "DuplicateMember",
    "InvalidDisplayId",
    "InvalidNucleotides",
    "InvalidPrecedence",
    "InvalidRange",
    "InvalidStrand",
    "MissingSequence",
    "PrecedenceCycle",
    "SBOLError",
    "SequenceAnnotation",
    "Strand",
]

__version__ = "0.1.0"
