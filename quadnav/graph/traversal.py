"""
Traversal engine for quadnav contexts.

Every operation here takes a Context and returns a new one; the input is
never modified and the store is only read:
- traverse(): follow predicates forward (OUT) or backward (IN)
- filter_has(): keep entries with at least one matching (predicate, object)
- walk_list(): decode an RDF Collection starting at a node

Results inherit the store's match order. Nothing is sorted or deduplicated
by traverse(), so the same term can appear more than once.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, Sequence

from rdflib.term import Node

from quadnav.graph.context import Context, ContextEntry
from quadnav.graph.exceptions import InvalidListError
from quadnav.graph.store import Quad
from quadnav.graph.terms import RDF_FIRST, RDF_NIL, RDF_REST

logger = logging.getLogger(__name__)


class TraversalDirection(Enum):
    """Direction of a traversal step.

    - OUT: context term is the subject, results are objects
    - IN: context term is the object, results are subjects
    """

    OUT = "OUT"
    IN = "IN"


# =============================================================================
# Pattern Matcher
# =============================================================================


def match_entry(
    entry: ContextEntry,
    direction: TraversalDirection,
    predicate: Node | None = None,
    other: Node | None = None,
    graph: Node | None = None,
) -> list[Quad]:
    """Ask the entry's store for quads anchored at the entry's term.

    Args:
        entry: Context entry supplying store, term and default graph
        direction: OUT anchors the term as subject, IN as object
        predicate: Predicate constraint (None for any)
        other: Constraint on the opposite end (None for any)
        graph: Graph constraint, falls back to the entry's graph

    Returns:
        Matching quads in store order
    """
    graph = graph if graph is not None else entry.graph
    if direction is TraversalDirection.OUT:
        return entry.store.match(entry.term, predicate, other, graph)
    return entry.store.match(other, predicate, entry.term, graph)


def _far_end(quad: Quad, direction: TraversalDirection) -> Node:
    return quad.object if direction is TraversalDirection.OUT else quad.subject


# =============================================================================
# out / in
# =============================================================================


def traverse(
    context: Context,
    predicates: Sequence[Node],
    direction: TraversalDirection,
    graph: Node | None = None,
) -> Context:
    """Follow predicates from every entry of the context.

    Entries are emitted per source entry, then per predicate, then in the
    store's match order.

    Args:
        context: Starting context
        predicates: Predicates to follow, in order
        direction: OUT or IN
        graph: Optional graph constraint overriding the entries' graphs

    Returns:
        New context with one entry per matching quad
    """
    entries: list[ContextEntry] = []
    for entry in context:
        scope = graph if graph is not None else entry.graph
        for predicate in predicates:
            for quad in match_entry(entry, direction, predicate, graph=scope):
                entries.append(entry.with_term(_far_end(quad, direction), scope))

    logger.debug(
        "traverse %s: %d entries -> %d entries",
        direction.value,
        len(context),
        len(entries),
    )
    return Context(entries)


# =============================================================================
# has
# =============================================================================


def filter_has(
    context: Context,
    predicates: Sequence[Node],
    objects: Sequence[Node],
    graph: Node | None = None,
) -> Context:
    """Keep entries that have any of the predicates pointing at any object.

    Term-bearing entries are kept or dropped as a whole, so the result never
    contains more of them than the input. A root entry (no term) searches the
    whole store and expands into every matching subject.
    """
    entries: list[ContextEntry] = []
    for entry in context:
        scope = graph if graph is not None else entry.graph
        if entry.term is None:
            for predicate in predicates:
                for obj in objects:
                    for quad in match_entry(
                        entry, TraversalDirection.OUT, predicate, obj, scope
                    ):
                        entries.append(entry.with_term(quad.subject, scope))
            continue

        if any(
            match_entry(entry, TraversalDirection.OUT, predicate, obj, scope)
            for predicate in predicates
            for obj in objects
        ):
            entries.append(entry)

    logger.debug("has: %d entries -> %d entries", len(context), len(entries))
    return Context(entries)


# =============================================================================
# list
# =============================================================================


def _single_value(
    entry: ContextEntry, node: Node, predicate: Node
) -> Node:
    quads = entry.store.match(node, predicate, None, entry.graph)
    if len(quads) != 1:
        raise InvalidListError(
            f"Invalid list: {predicate.n3()} has {len(quads)} values on {node.n3()}",
            node=node,
        )
    return quads[0].object


def walk_list(entry: ContextEntry, max_length: int) -> Iterator[Node]:
    """Yield the items of the RDF Collection whose head is entry.term.

    The walk reads the store lazily, one node at a time.

    Raises:
        InvalidListError: If a node lacks a unique rdf:first / rdf:rest, or
            the list is longer than max_length (which catches cycles)
    """
    node = entry.term
    count = 0
    while node != RDF_NIL:
        if count >= max_length:
            raise InvalidListError(
                f"List exceeds {max_length} items, it may be cyclic",
                node=entry.term,
            )
        yield _single_value(entry, node, RDF_FIRST)
        node = _single_value(entry, node, RDF_REST)
        count += 1
