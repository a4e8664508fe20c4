"""
Mutation engine.

Writes go straight to the stores the context entries are anchored to. There
is no copy-on-write: a deletion is immediately visible through every Pointer
sharing the store. Entries without a term are skipped.
"""

from __future__ import annotations

import logging
from typing import Sequence

from rdflib.term import Node

from quadnav.graph.context import Context, ContextEntry
from quadnav.graph.store import Quad
from quadnav.graph.terms import DEFAULT_GRAPH, RDF_FIRST, RDF_NIL, RDF_REST, blank_node
from quadnav.graph.traversal import TraversalDirection, match_entry

logger = logging.getLogger(__name__)


def delete_edges(
    context: Context,
    predicates: Sequence[Node] | None,
    direction: TraversalDirection,
) -> int:
    """Remove quads touching the context terms.

    Args:
        context: Entries whose terms anchor the deletion
        predicates: Only remove these predicates, None removes any predicate
        direction: OUT removes quads with the term as subject, IN as object

    Returns:
        Number of quads removed
    """
    removed = 0
    for entry in context:
        if entry.term is None:
            continue
        for predicate in predicates if predicates is not None else [None]:
            # match() returns a snapshot, so deleting while looping is safe
            for quad in match_entry(entry, direction, predicate):
                entry.store.delete(quad)
                removed += 1

    logger.debug("delete %s: removed %d quads", direction.value, removed)
    return removed


def _graph_of(entry: ContextEntry) -> Node:
    return entry.graph if entry.graph is not None else DEFAULT_GRAPH


def add_edges(
    context: Context,
    predicates: Sequence[Node],
    nodes: Sequence[Node],
    direction: TraversalDirection,
) -> int:
    """Link every context term to every node through every predicate.

    OUT adds (term, predicate, node), IN adds (node, predicate, term). Quads
    go into the entry's graph, or the default graph for unscoped entries.
    """
    added = 0
    for entry in context:
        if entry.term is None:
            continue
        graph = _graph_of(entry)
        for predicate in predicates:
            for node in nodes:
                if direction is TraversalDirection.OUT:
                    entry.store.add(Quad(entry.term, predicate, node, graph))
                else:
                    entry.store.add(Quad(node, predicate, entry.term, graph))
                added += 1

    logger.debug("add %s: wrote %d quads", direction.value, added)
    return added


def add_list(
    context: Context,
    predicates: Sequence[Node],
    items: Sequence[Node],
) -> None:
    """Attach a fresh RDF Collection of items to every context term.

    Each (entry, predicate) pair gets its own chain of blank nodes; an empty
    items list links straight to rdf:nil.
    """
    for entry in context:
        if entry.term is None:
            continue
        graph = _graph_of(entry)
        for predicate in predicates:
            head = _write_list(entry, items, graph)
            entry.store.add(Quad(entry.term, predicate, head, graph))


def _write_list(entry: ContextEntry, items: Sequence[Node], graph: Node) -> Node:
    if not items:
        return RDF_NIL
    nodes = [blank_node() for _ in items]
    for index, (node, item) in enumerate(zip(nodes, items)):
        rest = nodes[index + 1] if index + 1 < len(nodes) else RDF_NIL
        entry.store.add(Quad(node, RDF_FIRST, item, graph))
        entry.store.add(Quad(node, RDF_REST, rest, graph))
    return nodes[0]


def delete_list(context: Context, predicates: Sequence[Node]) -> int:
    """Remove the RDF Collections hanging off the context terms.

    Deletes the linking quads and every rdf:first / rdf:rest quad of each
    list node. Walking stops at rdf:nil or at a node already removed.

    Returns:
        Number of quads removed
    """
    removed = 0
    for entry in context:
        if entry.term is None:
            continue
        for predicate in predicates:
            for link in match_entry(entry, TraversalDirection.OUT, predicate):
                entry.store.delete(link)
                removed += 1
                removed += _delete_chain(entry, link.object)

    logger.debug("delete list: removed %d quads", removed)
    return removed


def _delete_chain(entry: ContextEntry, head: Node) -> int:
    removed = 0
    seen: set[Node] = set()
    node = head
    while node != RDF_NIL and node not in seen:
        seen.add(node)
        quads = entry.store.match(node, RDF_FIRST, None, entry.graph)
        rests = entry.store.match(node, RDF_REST, None, entry.graph)
        for quad in quads + rests:
            entry.store.delete(quad)
            removed += 1
        if len(rests) != 1:
            break
        node = rests[0].object
    return removed
