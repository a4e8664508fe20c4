"""
quadnav: multi-valued graph traversal over RDF quad stores.

    from quadnav import MemoryQuadStore, pointer

    store = MemoryQuadStore(quads)
    friends = pointer(store, alice).out(SDO.knows)
"""

from quadnav.core.config import Settings, get_settings
from quadnav.core.logging import get_logger, setup_structured_logging
from quadnav.graph import (
    DEFAULT_GRAPH,
    Context,
    ContextEntry,
    InvalidContextArityError,
    InvalidListError,
    MemoryQuadStore,
    Pointer,
    Quad,
    QuadnavError,
    QuadStoreProtocol,
    RdflibDatasetStore,
    UnsupportedNodeTypeError,
    pointer,
    to_term,
    to_terms,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
    "setup_structured_logging",
    "DEFAULT_GRAPH",
    "Context",
    "ContextEntry",
    "InvalidContextArityError",
    "InvalidListError",
    "MemoryQuadStore",
    "Pointer",
    "Quad",
    "QuadnavError",
    "QuadStoreProtocol",
    "RdflibDatasetStore",
    "UnsupportedNodeTypeError",
    "pointer",
    "to_term",
    "to_terms",
]
