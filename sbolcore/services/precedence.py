"""Directed-graph view over the precedes relation between sequence annotations."""

# purpose: analyse precedes links as a graph over an arena of annotations without ownership cycles
# status: active
# depends_on: networkx, sbolcore.models
# related_docs: SPEC_FULL.md

from __future__ import annotations

from typing import Sequence

import networkx as nx

from ..errors import PrecedenceCycle
from ..models import DnaComponent, SequenceAnnotation
from ..utils.logging import get_logger


def _arena_index(annotations: Sequence[SequenceAnnotation]) -> dict[int, int]:
    # keyed by object identity; annotations are unhashable value records
    return {id(annotation): position for position, annotation in enumerate(annotations)}


def build_precedence_graph(annotations: Sequence[SequenceAnnotation]) -> nx.DiGraph:
    """Return a DiGraph whose nodes are positions in ``annotations``.

    Each node carries the annotation under the ``annotation`` attribute. An
    edge ``i -> j`` means ``annotations[i]`` precedes ``annotations[j]``. Links
    to annotations outside of the arena are dropped.
    """

    index = _arena_index(annotations)
    graph = nx.DiGraph()
    for position, annotation in enumerate(annotations):
        graph.add_node(position, annotation=annotation)
    for position, annotation in enumerate(annotations):
        for successor in annotation.precedes:
            target = index.get(id(successor))
            if target is None:
                get_logger("precedence").debug(
                    "dropping precedes link from %r to annotation outside arena", annotation
                )
                continue
            graph.add_edge(position, target)
    return graph


def has_precedence_cycle(component: DnaComponent) -> bool:
    graph = build_precedence_graph(component.annotations)
    return not nx.is_directed_acyclic_graph(graph)


def precedence_order(component: DnaComponent) -> list[SequenceAnnotation]:
    """Order the component's annotations so every link points forward."""

    # purpose: linearise annotations for consumers that walk features in precedence order
    # inputs: DnaComponent with owned annotations
    # outputs: list of annotations; ties keep insertion order
    annotations = component.annotations
    graph = build_precedence_graph(annotations)
    if not nx.is_directed_acyclic_graph(graph):
        cycle = nx.find_cycle(graph)
        raise PrecedenceCycle([annotations[source] for source, _ in cycle])
    return [annotations[position] for position in nx.lexicographical_topological_sort(graph)]


def foreign_successors(component: DnaComponent) -> list[SequenceAnnotation]:
    """Successors referenced by the component's annotations but owned elsewhere."""

    annotations = component.annotations
    index = _arena_index(annotations)
    foreign: list[SequenceAnnotation] = []
    seen: set[int] = set()
    for annotation in annotations:
        for successor in annotation.precedes:
            key = id(successor)
            if key in index or key in seen:
                continue
            seen.add(key)
            foreign.append(successor)
    return foreign
