"""Pydantic snapshots of the SBOL core entities."""

# purpose: aggregate immutable value views handed to concurrent or read-only consumers
# status: active

from .snapshots import (
    CollectionSnapshot,
    DnaComponentSnapshot,
    DnaSequenceSnapshot,
    Snapshot,
    SequenceAnnotationSnapshot,
    snapshot,
)

__all__ = [
    "CollectionSnapshot",
    "DnaComponentSnapshot",
    "DnaSequenceSnapshot",
    "Snapshot",
    "SequenceAnnotationSnapshot",
    "snapshot",
]
