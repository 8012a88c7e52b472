"""Immutable snapshot coverage."""

# purpose: ensure snapshots are frozen, detached from the live records and acyclic
# status: active

import pytest
from pydantic import ValidationError

from sbolcore import Collection, DnaComponent, SequenceAnnotation, Strand
from sbolcore.schemas import (
    CollectionSnapshot,
    DnaComponentSnapshot,
    DnaSequenceSnapshot,
    SequenceAnnotationSnapshot,
    snapshot,
)


def test_component_snapshot_captures_tree(annotated_part):
    view = snapshot(annotated_part)

    assert isinstance(view, DnaComponentSnapshot)
    assert view.display_id == "partA"
    assert view.dna_sequence == DnaSequenceSnapshot(nucleotides="ACGTTGCATGCA")
    first, second = view.annotations
    assert (first.bio_start, first.bio_end, first.strand) == (1, 6, Strand.FORWARD)
    assert second.strand == "-"
    assert first.precedes == (1,)
    assert second.precedes == ()
    assert first.sub_components[0].display_id == "pLacO1"
    assert first.sub_components[0].types == ("http://purl.obolibrary.org/obo/SO_0000167",)


def test_snapshot_is_frozen_and_detached(annotated_part):
    view = snapshot(annotated_part)
    assert view == snapshot(annotated_part)
    assert hash(view) == hash(snapshot(annotated_part))
    with pytest.raises(ValidationError):
        view.name = "renamed"
    annotated_part.name = "renamed"
    annotated_part.add_annotation(SequenceAnnotation(2, 3))
    assert view.name == "part A"
    assert len(view.annotations) == 2
    assert view != snapshot(annotated_part)


def test_standalone_annotation_snapshot_drops_links():
    annotation = SequenceAnnotation(1, 3, "+")
    annotation.add_precede(SequenceAnnotation(4, 5, "+"))
    view = snapshot(annotation)
    assert isinstance(view, SequenceAnnotationSnapshot)
    assert view.precedes == ()


def test_collection_snapshot(promoter):
    collection = Collection("col1", "Project A", components=[promoter], uri="urn:col1")
    view = snapshot(collection)
    assert isinstance(view, CollectionSnapshot)
    assert view.uri == "urn:col1"
    assert [component.display_id for component in view.components] == ["pLacO1"]


def test_snapshot_rejects_unknown_objects():
    with pytest.raises(TypeError):
        snapshot("ACGT")


def test_shared_sub_feature_is_copied_per_use(promoter):
    part = DnaComponent(
        display_id="tandem",
        annotations=[
            SequenceAnnotation(1, 21, "+", sub_components=[promoter]),
            SequenceAnnotation(30, 50, "+", sub_components=[promoter]),
        ],
    )
    view = snapshot(part)
    first, second = view.annotations
    assert first.sub_components == second.sub_components
