"""SBOL core data model: sequences, components, annotations and collections."""

# purpose: define the four SBOL core record types with value equality and guarded set relations
# status: active
# depends_on: sbolcore.services.validation
# related_docs: SPEC_FULL.md, DESIGN.md

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Sequence

from .errors import CyclicContainment, InvalidPrecedence, InvalidStrand
from .services.validation import (
    add_unique,
    check_coordinate,
    check_display_id,
    check_nucleotides,
    check_range,
)


def _same_members(left: Sequence[Any], right: Sequence[Any]) -> bool:
    """Order-insensitive comparison of two duplicate-free member lists."""

    if len(left) != len(right):
        return False
    return all(item in right for item in left) and all(item in left for item in right)


def _reaches(roots: Iterable[DnaComponent], target: object) -> bool:
    """True when ``target`` is one of ``roots`` or sits below them.

    Walks component -> annotations -> sub-feature components by identity.
    """

    pending = list(roots)
    seen: set[int] = set()
    while pending:
        component = pending.pop()
        if component is target:
            return True
        if id(component) in seen:
            continue
        seen.add(id(component))
        for annotation in component._annotations:
            if annotation is target:
                return True
            pending.extend(annotation._sub_components)
    return False


class Strand(str, Enum):
    """Orientation of a feature relative to the 5' to 3' reference direction."""

    FORWARD = "+"
    REVERSE = "-"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Strand | str | None) -> Strand | None:
        if value is None or isinstance(value, Strand):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidStrand(value)


class DnaSequence:
    """Nucleotide text of a DNA component.

    The text is stored verbatim. Unless ``SBOL_VALIDATE_NUCLEOTIDES`` is turned
    off, every write is checked against the IUPAC DNA alphabet (either case) and
    rejected when it holds whitespace or any other symbol.
    """

    __slots__ = ("uri", "_nucleotides")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, nucleotides: str | None = None, *, uri: str | None = None):
        self.uri = uri
        self._nucleotides: str | None = None
        self.nucleotides = nucleotides

    @property
    def nucleotides(self) -> str | None:
        return self._nucleotides

    @nucleotides.setter
    def nucleotides(self, value: str | None) -> None:
        self._nucleotides = check_nucleotides(value)

    @property
    def length(self) -> int:
        return len(self)

    def __len__(self) -> int:
        # an empty sequence is falsy; test ``is None`` when checking for absence
        return len(self._nucleotides or "")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DnaSequence):
            return NotImplemented
        return self._nucleotides == other._nucleotides

    def __repr__(self) -> str:
        return f"DnaSequence(uri={self.uri!r}, length={self.length})"


class SequenceAnnotation:
    """Position and direction of sub-features on a DNA component's sequence.

    Coordinates are 1-based and inclusive. The ``precedes`` links are kept out
    of equality: two annotations at the same place, on the same strand and
    carrying the same sub-features are equal whatever they precede.
    """

    __slots__ = ("uri", "_start", "_end", "_strand", "_sub_components", "_precedes")
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        bio_start: int | None = None,
        bio_end: int | None = None,
        strand: Strand | str | None = None,
        *,
        sub_components: Iterable[DnaComponent] = (),
        precedes: Iterable[SequenceAnnotation] = (),
        uri: str | None = None,
    ):
        self.uri = uri
        self._start: int | None = None
        self._end: int | None = None
        self._strand: Strand | None = None
        self._sub_components: list[DnaComponent] = []
        self._precedes: list[SequenceAnnotation] = []
        self.set_range(bio_start, bio_end)
        self.strand = strand
        for component in sub_components:
            self.add_feature(component)
        for annotation in precedes:
            self.add_precede(annotation)

    @property
    def bio_start(self) -> int | None:
        return self._start

    @bio_start.setter
    def bio_start(self, value: int | None) -> None:
        self.set_range(value, self._end)

    @property
    def bio_end(self) -> int | None:
        return self._end

    @bio_end.setter
    def bio_end(self, value: int | None) -> None:
        self.set_range(self._start, value)

    def set_range(self, start: int | None, end: int | None) -> None:
        """Set both coordinates at once, leaving the annotation untouched on failure."""

        start = check_coordinate(start, "start")
        end = check_coordinate(end, "end")
        check_range(start, end)
        self._start, self._end = start, end

    @property
    def length(self) -> int | None:
        if self._start is None or self._end is None:
            return None
        return self._end - self._start + 1

    @property
    def strand(self) -> Strand | None:
        return self._strand

    @strand.setter
    def strand(self, value: Strand | str | None) -> None:
        self._strand = Strand.parse(value)

    @property
    def sub_components(self) -> tuple[DnaComponent, ...]:
        return tuple(self._sub_components)

    def add_feature(self, component: DnaComponent) -> bool:
        """Place a sub-feature component at this location."""

        if not isinstance(component, DnaComponent):
            raise TypeError(f"sub-feature must be a DnaComponent, got {type(component).__name__}")
        if _reaches([component], self):
            raise CyclicContainment(f"{component!r} already contains this annotation")
        return add_unique(self._sub_components, component, container="SequenceAnnotation.sub_components")

    @property
    def precedes(self) -> tuple[SequenceAnnotation, ...]:
        return tuple(self._precedes)

    @precedes.setter
    def precedes(self, annotations: Iterable[SequenceAnnotation]) -> None:
        previous = self._precedes
        self._precedes = []
        try:
            for annotation in annotations:
                self.add_precede(annotation)
        except Exception:
            self._precedes = previous
            raise

    def add_precede(self, other: SequenceAnnotation) -> bool:
        """Record that this annotation comes before ``other``; cycles are not checked here."""

        if not isinstance(other, SequenceAnnotation):
            raise TypeError(f"precedes target must be a SequenceAnnotation, got {type(other).__name__}")
        if other is self:
            raise InvalidPrecedence("an annotation cannot precede itself")
        return add_unique(self._precedes, other, container="SequenceAnnotation.precedes")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceAnnotation):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and self._strand == other._strand
            and _same_members(self._sub_components, other._sub_components)
        )

    def __repr__(self) -> str:
        return (
            f"SequenceAnnotation(uri={self.uri!r}, bio_start={self._start}, "
            f"bio_end={self._end}, strand={self._strand and self._strand.value!r})"
        )


class DnaComponent:
    """DNA segment for biological engineering, described by annotations.

    Annotations and types are unique by value when inserted. Mutating an
    annotation after insertion is not re-checked, so it can leave two
    value-equal annotations side by side. Sub-feature links that would make the
    component contain itself are refused with ``CyclicContainment``.
    """

    __slots__ = (
        "uri",
        "_display_id",
        "name",
        "description",
        "is_circular",
        "_dna_sequence",
        "_types",
        "_annotations",
    )
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        display_id: str | None = None,
        name: str | None = None,
        description: str | None = None,
        *,
        is_circular: bool = False,
        dna_sequence: DnaSequence | None = None,
        types: Iterable[str] = (),
        annotations: Iterable[SequenceAnnotation] = (),
        uri: str | None = None,
    ):
        self.uri = uri
        self._display_id: str | None = None
        self.display_id = display_id
        self.name = name
        self.description = description
        self.is_circular = is_circular
        self._dna_sequence: DnaSequence | None = None
        self.dna_sequence = dna_sequence
        self._types: list[str] = []
        self._annotations: list[SequenceAnnotation] = []
        for type_uri in types:
            self.add_type(type_uri)
        for annotation in annotations:
            self.add_annotation(annotation)

    @property
    def display_id(self) -> str | None:
        return self._display_id

    @display_id.setter
    def display_id(self, value: str | None) -> None:
        self._display_id = check_display_id(value)

    @property
    def dna_sequence(self) -> DnaSequence | None:
        return self._dna_sequence

    @dna_sequence.setter
    def dna_sequence(self, value: DnaSequence | None) -> None:
        # shared reference; no consistency check against annotation coordinates
        if value is not None and not isinstance(value, DnaSequence):
            raise TypeError(f"dna_sequence must be a DnaSequence, got {type(value).__name__}")
        self._dna_sequence = value

    @property
    def types(self) -> frozenset[str]:
        return frozenset(self._types)

    def add_type(self, type_uri: str) -> bool:
        """Classify the component with an ontology term URI (e.g. a Sequence Ontology term)."""

        if not isinstance(type_uri, str) or not type_uri:
            raise TypeError("type must be a non-empty URI string")
        return add_unique(self._types, type_uri, container="DnaComponent.types")

    @property
    def annotations(self) -> tuple[SequenceAnnotation, ...]:
        return tuple(self._annotations)

    def add_annotation(self, annotation: SequenceAnnotation) -> bool:
        if not isinstance(annotation, SequenceAnnotation):
            raise TypeError(f"annotation must be a SequenceAnnotation, got {type(annotation).__name__}")
        if _reaches(annotation._sub_components, self):
            raise CyclicContainment(f"{self!r} is a sub-feature of the annotation being added")
        return add_unique(self._annotations, annotation, container="DnaComponent.annotations")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DnaComponent):
            return NotImplemented
        return (
            self._display_id == other._display_id
            and self.name == other.name
            and self.description == other.description
            and self.is_circular == other.is_circular
            and set(self._types) == set(other._types)
            and self._dna_sequence == other._dna_sequence
            and _same_members(self._annotations, other._annotations)
        )

    def __repr__(self) -> str:
        return f"DnaComponent(uri={self.uri!r}, display_id={self._display_id!r})"


class Collection:
    """Organizational grouping of DNA components, e.g. all parts of one project.

    Membership is unique by value at insertion time only; a component edited
    after it was added may end up equal to another member.
    """

    __slots__ = ("uri", "_display_id", "name", "description", "_components")
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        display_id: str | None = None,
        name: str | None = None,
        description: str | None = None,
        *,
        components: Iterable[DnaComponent] = (),
        uri: str | None = None,
    ):
        self.uri = uri
        self._display_id: str | None = None
        self.display_id = display_id
        self.name = name
        self.description = description
        self._components: list[DnaComponent] = []
        for component in components:
            self.add_component(component)

    @property
    def display_id(self) -> str | None:
        return self._display_id

    @display_id.setter
    def display_id(self, value: str | None) -> None:
        self._display_id = check_display_id(value)

    @property
    def components(self) -> tuple[DnaComponent, ...]:
        return tuple(self._components)

    def add_component(self, component: DnaComponent) -> bool:
        if not isinstance(component, DnaComponent):
            raise TypeError(f"member must be a DnaComponent, got {type(component).__name__}")
        return add_unique(self._components, component, container="Collection.components")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return (
            self._display_id == other._display_id
            and self.name == other.name
            and self.description == other.description
            and _same_members(self._components, other._components)
        )

    def __repr__(self) -> str:
        return f"Collection(uri={self.uri!r}, display_id={self._display_id!r}, components={len(self._components)})"
