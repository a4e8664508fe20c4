"""
Quad store collaborators.

quadnav never owns the data it navigates. Pointers talk to a store through
the small QuadStore protocol below, so anything that can match, add and
delete quads can be navigated.

This module provides:
- QuadStoreProtocol: the interface the traversal and mutation engines need
- MemoryQuadStore: insertion-ordered in-memory store (deterministic match order)
- RdflibDatasetStore: adapter over an rdflib.Dataset
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Protocol, runtime_checkable

from rdflib import Dataset, Graph
from rdflib.term import Node

from quadnav.graph.terms import DEFAULT_GRAPH


class Quad(NamedTuple):
    """A (subject, predicate, object, graph) statement."""

    subject: Node
    predicate: Node
    object: Node
    graph: Node = DEFAULT_GRAPH


@runtime_checkable
class QuadStoreProtocol(Protocol):
    """Protocol defining the quad store interface.

    Any class implementing these methods can back a Pointer. A None
    position in match() leaves that position unconstrained.
    """

    def match(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        obj: Node | None = None,
        graph: Node | None = None,
    ) -> list[Quad]:
        """Return the quads matching the pattern."""
        ...

    def add(self, quad: Quad) -> None:
        """Add a quad (no-op if already present)."""
        ...

    def delete(self, quad: Quad) -> None:
        """Remove a quad (no-op if absent)."""
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Quad]:
        ...


# =============================================================================
# MemoryQuadStore
# =============================================================================


class MemoryQuadStore:
    """In-memory quad store with deterministic, insertion-ordered matching.

    Quads are kept in an insertion-ordered dict and indexed by subject,
    predicate and object. Each index bucket is itself insertion-ordered, so
    match() always returns quads in the order they were first added,
    whichever index is used to answer it.

    Usage:
        store = MemoryQuadStore()
        store.add(Quad(alice, FOAF.knows, bob))
        store.match(subject=alice)  # [Quad(alice, FOAF.knows, bob, DEFAULT_GRAPH)]
    """

    def __init__(self, quads: Iterable[Quad | tuple] | None = None) -> None:
        """Initialize the store, optionally with initial quads.

        Args:
            quads: Quads or 3/4-tuples to add in order
        """
        self._quads: dict[Quad, None] = {}
        self._by_subject: dict[Node, dict[Quad, None]] = {}
        self._by_predicate: dict[Node, dict[Quad, None]] = {}
        self._by_object: dict[Node, dict[Quad, None]] = {}
        for quad in quads or ():
            self.add(quad)

    @property
    def size(self) -> int:
        """Number of quads in the store."""
        return len(self._quads)

    def __len__(self) -> int:
        return len(self._quads)

    def __iter__(self) -> Iterator[Quad]:
        return iter(list(self._quads))

    def __contains__(self, quad: object) -> bool:
        if not isinstance(quad, tuple):
            return False
        return _as_quad(quad) in self._quads

    def add(self, quad: Quad | tuple) -> None:
        """Add a quad; 3-tuples land in the default graph."""
        quad = _as_quad(quad)
        if quad in self._quads:
            return
        self._quads[quad] = None
        self._by_subject.setdefault(quad.subject, {})[quad] = None
        self._by_predicate.setdefault(quad.predicate, {})[quad] = None
        self._by_object.setdefault(quad.object, {})[quad] = None

    def add_all(self, other: Iterable[Quad | tuple]) -> MemoryQuadStore:
        """Union another store (or any iterable of quads) into this one."""
        for quad in other:
            self.add(quad)
        return self

    def delete(self, quad: Quad | tuple) -> None:
        """Remove a quad if present."""
        quad = _as_quad(quad)
        if quad not in self._quads:
            return
        del self._quads[quad]
        for index, key in (
            (self._by_subject, quad.subject),
            (self._by_predicate, quad.predicate),
            (self._by_object, quad.object),
        ):
            bucket = index[key]
            del bucket[quad]
            if not bucket:
                del index[key]

    def delete_matches(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        obj: Node | None = None,
        graph: Node | None = None,
    ) -> int:
        """Remove every quad matching the pattern, returning how many went."""
        matches = self.match(subject, predicate, obj, graph)
        for quad in matches:
            self.delete(quad)
        return len(matches)

    def match(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        obj: Node | None = None,
        graph: Node | None = None,
    ) -> list[Quad]:
        """Return a snapshot list of matching quads in insertion order."""
        candidates = self._candidates(subject, predicate, obj)
        return [
            quad
            for quad in candidates
            if (subject is None or quad.subject == subject)
            and (predicate is None or quad.predicate == predicate)
            and (obj is None or quad.object == obj)
            and (graph is None or quad.graph == graph)
        ]

    def clear(self) -> None:
        """Remove all quads."""
        self._quads.clear()
        self._by_subject.clear()
        self._by_predicate.clear()
        self._by_object.clear()

    def _candidates(
        self,
        subject: Node | None,
        predicate: Node | None,
        obj: Node | None,
    ) -> Iterable[Quad]:
        """Pick the smallest index bucket that can answer the pattern."""
        buckets = []
        if subject is not None:
            buckets.append(self._by_subject.get(subject, {}))
        if obj is not None:
            buckets.append(self._by_object.get(obj, {}))
        if predicate is not None:
            buckets.append(self._by_predicate.get(predicate, {}))
        if not buckets:
            return self._quads
        return min(buckets, key=len)


# =============================================================================
# RdflibDatasetStore
# =============================================================================


class RdflibDatasetStore:
    """Adapter exposing an rdflib.Dataset through the quad store protocol.

    Match order is whatever rdflib's store yields. Quads in the dataset's
    default graph are reported with graph=DEFAULT_GRAPH.

    Usage:
        ds = Dataset()
        ds.parse(data=trig_text, format="trig")
        store = RdflibDatasetStore(ds)
    """

    def __init__(self, dataset: Dataset | None = None) -> None:
        """Initialize with an existing dataset or a fresh empty one."""
        self._dataset = dataset if dataset is not None else Dataset()

    @property
    def dataset(self) -> Dataset:
        """Get the wrapped rdflib dataset."""
        return self._dataset

    def __len__(self) -> int:
        return sum(1 for _ in self._dataset.quads((None, None, None, None)))

    def __iter__(self) -> Iterator[Quad]:
        return iter(self.match())

    def __contains__(self, quad: object) -> bool:
        if not isinstance(quad, tuple):
            return False
        quad = _as_quad(quad)
        return bool(self.match(*quad))

    def add(self, quad: Quad | tuple) -> None:
        """Add a quad to the graph it names."""
        quad = _as_quad(quad)
        self._dataset.add((quad.subject, quad.predicate, quad.object, quad.graph))

    def add_all(self, other: Iterable[Quad | tuple]) -> RdflibDatasetStore:
        """Union another store (or any iterable of quads) into this one."""
        for quad in other:
            self.add(quad)
        return self

    def delete(self, quad: Quad | tuple) -> None:
        """Remove a quad from the graph it names."""
        quad = _as_quad(quad)
        self._dataset.remove((quad.subject, quad.predicate, quad.object, quad.graph))

    def match(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        obj: Node | None = None,
        graph: Node | None = None,
    ) -> list[Quad]:
        """Return a snapshot list of matching quads."""
        return [
            Quad(s, p, o, _graph_name(g))
            for s, p, o, g in self._dataset.quads((subject, predicate, obj, graph))
        ]


# =============================================================================
# Helpers
# =============================================================================


def _as_quad(value: Quad | tuple) -> Quad:
    """Accept Quads, 3-tuples (default graph) and 4-tuples."""
    if isinstance(value, Quad):
        return value
    if len(value) == 3:
        return Quad(*value)
    subject, predicate, obj, graph = value
    return Quad(subject, predicate, obj, DEFAULT_GRAPH if graph is None else graph)


def _graph_name(graph: Graph | Node | None) -> Node:
    """Normalise the context rdflib reports for a quad into a graph term."""
    if isinstance(graph, Graph):
        graph = graph.identifier
    return DEFAULT_GRAPH if graph is None else graph
