import pytest

from sbolcore import DnaComponent, DnaSequence, SequenceAnnotation

SO_PROMOTER = "http://purl.obolibrary.org/obo/SO_0000167"
SO_CDS = "http://purl.obolibrary.org/obo/SO_0000316"


@pytest.fixture(autouse=True)
def default_policies(monkeypatch):
    for name in (
        "SBOL_VALIDATE_NUCLEOTIDES",
        "SBOL_STRICT_DISPLAY_ID",
        "SBOL_DUPLICATE_POLICY",
        "SBOL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def promoter():
    return DnaComponent(
        display_id="pLacO1",
        name="pLac-O1",
        description="engineered Lac promoter, repressible by LacI",
        types=[SO_PROMOTER],
        dna_sequence=DnaSequence("AATTGTGAGCGGATAACAATT"),
    )


@pytest.fixture
def annotated_part(promoter):
    """Composite part: promoter at 1..6 on '+', coding region at 7..12 on '-'."""

    cds = DnaComponent(display_id="cds", types=[SO_CDS])
    part = DnaComponent(
        display_id="partA",
        name="part A",
        dna_sequence=DnaSequence("ACGTTGCATGCA"),
    )
    first = SequenceAnnotation(1, 6, "+", sub_components=[promoter])
    second = SequenceAnnotation(7, 12, "-", sub_components=[cds])
    first.add_precede(second)
    part.add_annotation(first)
    part.add_annotation(second)
    return part
