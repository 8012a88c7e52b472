import pytest

from sbolcore import DnaComponent, DnaSequence, InvalidRange, MissingSequence, SequenceAnnotation
from sbolcore.services.features import coordinate_issues, feature_sequence


def test_forward_feature_is_sliced_inclusively(annotated_part):
    first = annotated_part.annotations[0]
    assert feature_sequence(annotated_part, first) == "ACGTTG"


def test_reverse_feature_is_reverse_complemented(annotated_part):
    second = annotated_part.annotations[1]
    assert feature_sequence(annotated_part, second) == "TGCATG"


def test_feature_without_strand_reads_forward():
    component = DnaComponent(dna_sequence=DnaSequence("aaccggtt"))
    assert feature_sequence(component, SequenceAnnotation(3, 4)) == "cc"


def test_feature_errors():
    component = DnaComponent(dna_sequence=DnaSequence("ACGT"))
    with pytest.raises(InvalidRange):
        feature_sequence(component, SequenceAnnotation(3, 5))
    with pytest.raises(InvalidRange):
        feature_sequence(component, SequenceAnnotation(bio_start=2))
    with pytest.raises(MissingSequence):
        feature_sequence(DnaComponent(), SequenceAnnotation(1, 2))
    with pytest.raises(MissingSequence):
        feature_sequence(DnaComponent(dna_sequence=DnaSequence()), SequenceAnnotation(1, 2))


def test_coordinate_issues(annotated_part):
    assert coordinate_issues(annotated_part) == []
    annotated_part.add_annotation(SequenceAnnotation(10, 30))
    annotated_part.add_annotation(SequenceAnnotation(bio_start=3))
    issues = coordinate_issues(annotated_part)
    assert len(issues) == 2
    assert "beyond sequence length 12" in issues[0]
    assert "not placed" in issues[1]


def test_coordinate_issues_without_sequence():
    component = DnaComponent(annotations=[SequenceAnnotation(1, 2)])
    assert coordinate_issues(component) == [
        "annotation 0 is placed but the component has no sequence"
    ]
