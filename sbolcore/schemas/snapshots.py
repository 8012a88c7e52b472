"""Immutable snapshots of the SBOL core entities."""

# purpose: hand out frozen, acyclic value copies that concurrent readers can share safely
# status: active
# depends_on: pydantic, sbolcore.models, sbolcore.services.precedence
# related_docs: SPEC_FULL.md

from __future__ import annotations

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..models import Collection, DnaComponent, DnaSequence, SequenceAnnotation, Strand
from ..services.precedence import build_precedence_graph


class DnaSequenceSnapshot(BaseModel):
    """Frozen copy of a DnaSequence."""

    model_config = ConfigDict(frozen=True)

    uri: Optional[str] = None
    nucleotides: Optional[str] = None


class SequenceAnnotationSnapshot(BaseModel):
    """Frozen copy of a SequenceAnnotation."""

    # purpose: keep precedes links as positions within the owning component's annotations
    model_config = ConfigDict(frozen=True)

    uri: Optional[str] = None
    bio_start: Optional[int] = None
    bio_end: Optional[int] = None
    strand: Optional[Strand] = None
    sub_components: Tuple["DnaComponentSnapshot", ...] = ()
    precedes: Tuple[int, ...] = ()


class DnaComponentSnapshot(BaseModel):
    """Frozen copy of a DnaComponent and everything it reaches."""

    model_config = ConfigDict(frozen=True)

    uri: Optional[str] = None
    display_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_circular: bool = False
    types: Tuple[str, ...] = ()
    dna_sequence: Optional[DnaSequenceSnapshot] = None
    annotations: Tuple[SequenceAnnotationSnapshot, ...] = ()


class CollectionSnapshot(BaseModel):
    """Frozen copy of a Collection."""

    model_config = ConfigDict(frozen=True)

    uri: Optional[str] = None
    display_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    components: Tuple[DnaComponentSnapshot, ...] = ()


SequenceAnnotationSnapshot.model_rebuild()

Snapshot = Union[
    DnaSequenceSnapshot,
    SequenceAnnotationSnapshot,
    DnaComponentSnapshot,
    CollectionSnapshot,
]


def _sequence(sequence: DnaSequence) -> DnaSequenceSnapshot:
    return DnaSequenceSnapshot(uri=sequence.uri, nucleotides=sequence.nucleotides)


def _annotation(annotation: SequenceAnnotation, precedes: Tuple[int, ...]) -> SequenceAnnotationSnapshot:
    return SequenceAnnotationSnapshot(
        uri=annotation.uri,
        bio_start=annotation.bio_start,
        bio_end=annotation.bio_end,
        strand=annotation.strand,
        sub_components=tuple(_component(sub) for sub in annotation.sub_components),
        precedes=precedes,
    )


def _component(component: DnaComponent) -> DnaComponentSnapshot:
    # containment is acyclic: DnaComponent.add_annotation and add_feature refuse loops
    annotations = component.annotations
    graph = build_precedence_graph(annotations)
    return DnaComponentSnapshot(
        uri=component.uri,
        display_id=component.display_id,
        name=component.name,
        description=component.description,
        is_circular=component.is_circular,
        types=tuple(sorted(component.types)),
        dna_sequence=None if component.dna_sequence is None else _sequence(component.dna_sequence),
        annotations=tuple(
            _annotation(annotation, tuple(sorted(graph.successors(position))))
            for position, annotation in enumerate(annotations)
        ),
    )


def snapshot(entity: DnaSequence | SequenceAnnotation | DnaComponent | Collection) -> Snapshot:
    """Take an immutable copy of any core entity.

    A standalone annotation has no arena to resolve its precedes links against,
    so its snapshot carries an empty ``precedes``.
    """

    if isinstance(entity, DnaSequence):
        return _sequence(entity)
    if isinstance(entity, SequenceAnnotation):
        return _annotation(entity, ())
    if isinstance(entity, DnaComponent):
        return _component(entity)
    if isinstance(entity, Collection):
        return CollectionSnapshot(
            uri=entity.uri,
            display_id=entity.display_id,
            name=entity.name,
            description=entity.description,
            components=tuple(_component(component) for component in entity.components),
        )
    raise TypeError(f"cannot snapshot {type(entity).__name__}")
