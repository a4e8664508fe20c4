"""
Pointer: the traversable handle over a quad store.

A Pointer combines a Context with the traversal and mutation engines.
Navigation methods (out, in_, has, filter, node, ...) return a new Pointer;
mutation methods (delete_in, delete_out, add_out, ...) change the store and
return the same Pointer so calls can be chained.

Usage:
    people = pointer(store, URIRef("http://example.org/alice"))
    names = people.out(SDO.knows).out(SDO.givenName).values

    for item in people.out(EX.favourites).list():
        print(item)
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Sequence, TypeVar, Union

from rdflib import URIRef
from rdflib.term import Node

from quadnav.core.config import Settings, get_settings
from quadnav.graph.context import Context, ContextEntry
from quadnav.graph.exceptions import InvalidContextArityError
from quadnav.graph.mutation import (
    add_edges,
    add_list,
    delete_edges,
    delete_list,
)
from quadnav.graph.terms import (
    NodeInput,
    blank_node,
    term_value,
    to_predicates,
    to_term,
    to_terms,
)
from quadnav.graph.traversal import (
    TraversalDirection,
    filter_has,
    traverse,
    walk_list,
)

T = TypeVar("T")

Predicates = Union[Node, Sequence[Node]]


class Pointer:
    """A set of graph nodes plus the operations to move between them.

    Attributes are read-only; every navigation allocates a new Pointer, so a
    Pointer can be shared freely. The store is shared by reference: writes
    through one Pointer are visible through every other Pointer on the same
    store.
    """

    def __init__(
        self,
        context: Context,
        store: Any,
        settings: Settings | None = None,
    ) -> None:
        """Initialize a pointer.

        Args:
            context: The entries this pointer is positioned at
            store: Store new nodes are anchored to (see node())
            settings: Library settings, shared with derived pointers
        """
        self._context = context
        self._store = store
        self._settings = settings or get_settings()

    def _derive(self, context: Context) -> Pointer:
        return Pointer(context, self._store, self._settings)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def context(self) -> Context:
        """The entries this pointer is positioned at."""
        return self._context

    @property
    def store(self) -> Any:
        return self._store

    @property
    def term(self) -> Node | None:
        """The single term, or None unless the context has exactly one entry."""
        return self._context.term

    @property
    def terms(self) -> list[Node]:
        return self._context.terms

    @property
    def value(self) -> str | None:
        """Textual value of the single term, or None."""
        return term_value(self.term)

    @property
    def values(self) -> list[str]:
        return [term_value(term) for term in self._context.terms]

    def __len__(self) -> int:
        return len(self._context)

    def __iter__(self) -> Iterator[Pointer]:
        return iter(self.to_array())

    def __str__(self) -> str:
        return ",".join(self.values)

    def __repr__(self) -> str:
        return f"Pointer(terms={self.terms!r})"

    # =========================================================================
    # Node construction
    # =========================================================================

    def node(
        self,
        values: NodeInput,
        language: str | None = None,
        datatype: URIRef | None = None,
    ) -> Pointer:
        """Jump to arbitrary nodes on this pointer's store.

        Strings and numbers become literals; language and datatype apply to
        them. The new entries keep the graph scope of this pointer.
        """
        terms = to_terms(values, language=language, datatype=datatype)
        return self._derive(Context.from_terms(self._store, terms, self._graph))

    def named_node(self, iri: str | Sequence[str]) -> Pointer:
        iris = iri if isinstance(iri, (list, tuple)) else [iri]
        return self.node([URIRef(str(value)) for value in iris])

    def blank_node(self, label: str | None = None) -> Pointer:
        return self.node(blank_node(label))

    def literal(
        self,
        value: str | int | float,
        language: str | None = None,
        datatype: URIRef | None = None,
    ) -> Pointer:
        return self.node(to_term(value, language=language, datatype=datatype))

    @property
    def _graph(self) -> Node | None:
        entries = self._context.entries
        return entries[0].graph if entries else None

    # =========================================================================
    # Navigation
    # =========================================================================

    def out(self, predicates: Predicates, graph: Node | None = None) -> Pointer:
        """Follow predicates from subject to object.

        Args:
            predicates: One predicate or a list, followed in order
            graph: Restrict matches to this graph (default: entry scope)

        Returns:
            New pointer at every object reached
        """
        return self._derive(
            traverse(
                self._context,
                to_predicates(predicates) or [],
                TraversalDirection.OUT,
                graph,
            )
        )

    def in_(self, predicates: Predicates, graph: Node | None = None) -> Pointer:
        """Follow predicates from object back to subject."""
        return self._derive(
            traverse(
                self._context,
                to_predicates(predicates) or [],
                TraversalDirection.IN,
                graph,
            )
        )

    def has(
        self,
        predicates: Predicates,
        objects: NodeInput,
        graph: Node | None = None,
    ) -> Pointer:
        """Keep the nodes that have any predicate pointing at any object.

        Objects that are not terms are coerced (strings become literals). On
        a root pointer the whole store is searched for matching subjects.
        """
        return self._derive(
            filter_has(
                self._context,
                to_predicates(predicates) or [],
                to_terms(objects),
                graph,
            )
        )

    def list(self) -> Iterator[Node]:
        """Iterate over the RDF Collection starting at the single term.

        The context is checked immediately; the walk itself is lazy and reads
        the store as it goes. Call list() again for a fresh walk.

        Raises:
            InvalidContextArityError: Unless there is exactly one entry with a term
        """
        entries = self._context.entries
        if len(entries) != 1 or entries[0].term is None:
            raise InvalidContextArityError(len(self._context.terms))
        return walk_list(entries[0], self._settings.max_list_length)

    # =========================================================================
    # Iteration helpers
    # =========================================================================

    def _single(self, entry: ContextEntry) -> Pointer:
        return Pointer(Context([entry]), entry.store, self._settings)

    def to_array(self) -> list[Pointer]:
        """One single-entry pointer per context entry, in order."""
        return [self._single(entry) for entry in self._context]

    def filter(self, callback: Callable[[Pointer, int], bool]) -> Pointer:
        """Keep the entries for which callback(pointer, index) is true."""
        kept = [
            entry
            for index, entry in enumerate(self._context)
            if callback(self._single(entry), index)
        ]
        return self._derive(Context(kept))

    def for_each(self, callback: Callable[[Pointer, int], Any]) -> Pointer:
        """Call callback(pointer, index) for every entry and return self."""
        for index, entry in enumerate(self._context):
            callback(self._single(entry), index)
        return self

    def map(self, callback: Callable[[Pointer, int], T]) -> list[T]:
        """Collect callback(pointer, index) for every entry."""
        return [
            callback(self._single(entry), index)
            for index, entry in enumerate(self._context)
        ]

    # =========================================================================
    # Mutation
    # =========================================================================

    def delete_in(self, predicates: Predicates | None = None) -> Pointer:
        """Remove quads pointing at the context terms (any predicate if None)."""
        delete_edges(self._context, to_predicates(predicates), TraversalDirection.IN)
        return self

    def delete_out(self, predicates: Predicates | None = None) -> Pointer:
        """Remove quads leaving the context terms (any predicate if None)."""
        delete_edges(self._context, to_predicates(predicates), TraversalDirection.OUT)
        return self

    def add_out(self, predicates: Predicates, objects: NodeInput) -> Pointer:
        """Add (term, predicate, object) for every term, predicate and object."""
        add_edges(
            self._context,
            to_predicates(predicates) or [],
            to_terms(objects),
            TraversalDirection.OUT,
        )
        return self

    def add_in(self, predicates: Predicates, subjects: NodeInput) -> Pointer:
        """Add (subject, predicate, term) for every term, predicate and subject."""
        add_edges(
            self._context,
            to_predicates(predicates) or [],
            to_terms(subjects),
            TraversalDirection.IN,
        )
        return self

    def add_list(self, predicates: Predicates, items: NodeInput) -> Pointer:
        """Attach an RDF Collection of items to every context term."""
        add_list(self._context, to_predicates(predicates) or [], to_terms(items))
        return self

    def delete_list(self, predicates: Predicates) -> Pointer:
        """Remove the RDF Collections reached through predicates."""
        delete_list(self._context, to_predicates(predicates) or [])
        return self


def pointer(
    store: Any,
    term: NodeInput = None,
    graph: Node | None = None,
    settings: Settings | None = None,
) -> Pointer:
    """Create a Pointer on a store.

    Args:
        store: Quad store to navigate (shared, not copied)
        term: Starting node(s); None gives a root pointer with no term,
            an empty list gives an empty context
        graph: Named graph every entry is scoped to
        settings: Library settings (defaults to get_settings())

    Raises:
        UnsupportedNodeTypeError: If term contains a value that is not a
            term, string or number
    """
    if term is None:
        context = Context.root(store, graph)
    else:
        context = Context.from_terms(store, to_terms(term), graph)
    return Pointer(context, store, settings)
