"""
Context model.

A context is the ordered set of "current nodes" a Pointer is positioned at.
Each entry pairs a term with the store it is anchored to and, optionally,
the named graph it is scoped to. Contexts are immutable: every navigation
step builds a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Iterator, Sequence, overload

from rdflib.term import Node


@dataclass(frozen=True, eq=False)
class ContextEntry:
    """One position in a context.

    Entries are equal when they share the same store object (by identity),
    term and graph.

    Attributes:
        store: Quad store the entry reads from (shared, never copied)
        term: The selected node, None for a root entry
        graph: Named graph the entry is scoped to, None for any graph
    """

    store: Any = field(repr=False)
    term: Node | None = None
    graph: Node | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContextEntry):
            return NotImplemented
        return (
            self.store is other.store
            and self.term == other.term
            and self.graph == other.graph
        )

    def __hash__(self) -> int:
        return hash((id(self.store), self.term, self.graph))

    def with_term(self, term: Node, graph: Node | None = None) -> ContextEntry:
        """Derive an entry on the same store for another term."""
        return replace(self, term=term, graph=self.graph if graph is None else graph)


class Context(Sequence[ContextEntry]):
    """Immutable ordered sequence of context entries."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[ContextEntry] = ()) -> None:
        self._entries: tuple[ContextEntry, ...] = tuple(entries)

    @classmethod
    def root(cls, store: Any, graph: Node | None = None) -> Context:
        """A single entry with no term, anchored to store."""
        return cls([ContextEntry(store=store, graph=graph)])

    @classmethod
    def from_terms(
        cls,
        store: Any,
        terms: Iterable[Node],
        graph: Node | None = None,
    ) -> Context:
        """One entry per term, in order, all sharing store and graph."""
        return cls(ContextEntry(store=store, term=term, graph=graph) for term in terms)

    @overload
    def __getitem__(self, index: int) -> ContextEntry: ...

    @overload
    def __getitem__(self, index: slice) -> Context: ...

    def __getitem__(self, index: int | slice) -> ContextEntry | Context:
        if isinstance(index, slice):
            return Context(self._entries[index])
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ContextEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Context({list(self._entries)!r})"

    @property
    def entries(self) -> tuple[ContextEntry, ...]:
        return self._entries

    @property
    def terms(self) -> list[Node]:
        """Terms of every entry that has one, in context order."""
        return [entry.term for entry in self._entries if entry.term is not None]

    @property
    def term(self) -> Node | None:
        """The sole entry's term, None unless there is exactly one entry."""
        if len(self._entries) != 1:
            return None
        return self._entries[0].term
