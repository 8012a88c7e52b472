"""Validation errors raised by the SBOL core data model."""

# purpose: give callers a typed error taxonomy for rejected mutations
# status: active
# related_docs: DESIGN.md

from __future__ import annotations

from typing import Any, Sequence


class SBOLError(ValueError):
    """Base class for every error raised by sbolcore."""


class InvalidRange(SBOLError):
    """Annotation coordinates are below 1 or the end precedes the start."""

    def __init__(self, start: int | None, end: int | None, reason: str | None = None):
        self.start = start
        self.end = end
        detail = reason or "end coordinate precedes start coordinate"
        super().__init__(f"invalid range [{start}, {end}]: {detail}")


class InvalidStrand(SBOLError):
    """Strand value outside of the accepted '+' / '-' set."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"invalid strand {value!r}; expected '+' or '-'")


class DuplicateMember(SBOLError):
    """A value-equal member was added while the reject policy is active."""

    def __init__(self, container: str, member: Any):
        self.container = container
        self.member = member
        super().__init__(f"{container} already holds a member equal to {member!r}")


class InvalidNucleotides(SBOLError):
    """Nucleotide text holds characters outside the IUPAC DNA alphabet."""

    def __init__(self, invalid: Sequence[str]):
        self.invalid = list(invalid)
        super().__init__(f"nucleotides contain invalid characters: {self.invalid}")


class InvalidDisplayId(SBOLError):
    """Display identifier fails the strict alphanumeric pattern."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"display id {value!r} must start with a letter or underscore "
            "and contain only letters, digits and underscores"
        )


class InvalidPrecedence(SBOLError):
    """An annotation was asked to precede itself."""


class PrecedenceCycle(SBOLError):
    """The precedes relation is cyclic so no linear order exists."""

    def __init__(self, cycle: Sequence[Any]):
        self.cycle = list(cycle)
        super().__init__(f"precedes relation contains a cycle of {len(self.cycle)} annotation(s)")


class MissingSequence(SBOLError):
    """A DNA component has no nucleotide text to slice."""


class CyclicContainment(SBOLError):
    """A DNA component contains itself through annotation sub-features."""
