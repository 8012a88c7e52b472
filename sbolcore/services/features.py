"""Feature sequence helpers bridging annotations and their component's nucleotides."""

# purpose: slice annotated regions out of a component sequence and report coordinate drift
# status: experimental
# depends_on: Bio.Seq, sbolcore.models
# related_docs: SPEC_FULL.md

from __future__ import annotations

from Bio.Seq import Seq

from ..errors import InvalidRange, MissingSequence
from ..models import DnaComponent, SequenceAnnotation, Strand


def _nucleotides(component: DnaComponent) -> str:
    sequence = component.dna_sequence
    if sequence is None or sequence.nucleotides is None:
        raise MissingSequence(f"{component!r} has no nucleotide sequence")
    return sequence.nucleotides


def feature_sequence(component: DnaComponent, annotation: SequenceAnnotation) -> str:
    """Return the annotated region read 5' to 3' on the annotation's strand."""

    # inputs: component owning the sequence, annotation with 1-based inclusive coordinates
    # outputs: sub-sequence; reverse complement for '-' strand annotations
    nucleotides = _nucleotides(component)
    start, end = annotation.bio_start, annotation.bio_end
    if start is None or end is None:
        raise InvalidRange(start, end, "annotation is not placed on the sequence")
    if end > len(nucleotides):
        raise InvalidRange(start, end, f"sequence is only {len(nucleotides)} bp long")
    region = nucleotides[start - 1 : end]
    if annotation.strand is Strand.REVERSE:
        return str(Seq(region).reverse_complement())
    return region


def coordinate_issues(component: DnaComponent) -> list[str]:
    """List annotations whose coordinates do not fit the component sequence."""

    issues: list[str] = []
    sequence = component.dna_sequence
    length = None if sequence is None or sequence.nucleotides is None else sequence.length
    for position, annotation in enumerate(component.annotations):
        start, end = annotation.bio_start, annotation.bio_end
        if start is None or end is None:
            issues.append(f"annotation {position} is not placed (start={start}, end={end})")
            continue
        if length is None:
            issues.append(f"annotation {position} is placed but the component has no sequence")
        elif end > length:
            issues.append(f"annotation {position} ends at {end} beyond sequence length {length}")
    return issues
