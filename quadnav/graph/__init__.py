# Graph module for quad-store navigation
"""
Graph layer for navigating quad stores:
- Pointer: multi-valued traversal handle (out, in_, has, list, ...)
- Context / ContextEntry: immutable ordered node sets
- MemoryQuadStore / RdflibDatasetStore: quad store collaborators
- Term coercion helpers
"""

from quadnav.graph.context import Context, ContextEntry
from quadnav.graph.exceptions import (
    InvalidContextArityError,
    InvalidListError,
    QuadnavError,
    UnsupportedNodeTypeError,
)
from quadnav.graph.pointer import Pointer, pointer
from quadnav.graph.store import (
    MemoryQuadStore,
    Quad,
    QuadStoreProtocol,
    RdflibDatasetStore,
)
from quadnav.graph.terms import (
    DEFAULT_GRAPH,
    RDF_FIRST,
    RDF_NIL,
    RDF_REST,
    to_predicates,
    to_term,
    to_terms,
)
from quadnav.graph.traversal import TraversalDirection

__all__ = [
    # Exceptions
    "QuadnavError",
    "UnsupportedNodeTypeError",
    "InvalidContextArityError",
    "InvalidListError",
    # Pointer
    "Pointer",
    "pointer",
    "Context",
    "ContextEntry",
    "TraversalDirection",
    # Stores
    "Quad",
    "QuadStoreProtocol",
    "MemoryQuadStore",
    "RdflibDatasetStore",
    # Terms
    "DEFAULT_GRAPH",
    "RDF_FIRST",
    "RDF_REST",
    "RDF_NIL",
    "to_term",
    "to_terms",
    "to_predicates",
]
