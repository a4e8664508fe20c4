"""
Term coercion for quadnav.

Callers may hand us rdflib terms, plain strings, numbers, or (nested) lists
of those. Everything is normalised here into rdflib terms before any
context is built:

- Node (URIRef, BNode, Literal) -> passed through unchanged
- str -> plain Literal (optionally with language or datatype)
- int / float / Decimal -> Literal of the canonical decimal text
- list / tuple -> one term per element, in order
- anything else -> UnsupportedNodeTypeError
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Sequence, Union

from rdflib import RDF, BNode, Literal, URIRef
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID
from rdflib.term import Node

from quadnav.graph.exceptions import UnsupportedNodeTypeError

# =============================================================================
# Well-known terms
# =============================================================================

DEFAULT_GRAPH = DATASET_DEFAULT_GRAPH_ID

RDF_FIRST = RDF.first
RDF_REST = RDF.rest
RDF_NIL = RDF.nil

Number = Union[int, float, Decimal]
NodeInput = Union[Node, str, Number, Sequence["NodeInput"], None]


# =============================================================================
# Coercion
# =============================================================================


def number_to_text(value: Number) -> str:
    """Render a number in its canonical decimal form.

    Integral values drop the fraction (1.0 -> "1", Decimal("1E+2") -> "100"),
    other values are written in plain positional notation without trailing
    zeros or an exponent (1e-7 -> "0.0000001"). Floats go through their
    shortest repr first, so 0.1 stays "0.1".
    """
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        value = Decimal(repr(value))
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "INF" if value > 0 else "-INF"
    if value == value.to_integral_value():
        return str(int(value))
    return format(value, "f").rstrip("0")


def to_term(
    value: Node | str | Number,
    language: str | None = None,
    datatype: URIRef | None = None,
) -> Node:
    """Coerce a single scalar value into an rdflib term.

    Args:
        value: Term, string or number
        language: Language tag applied to string literals
        datatype: Datatype IRI applied to string and number literals

    Returns:
        The coerced term

    Raises:
        UnsupportedNodeTypeError: If value is not a term, string or number
    """
    # URIRef subclasses str, so terms must be checked first
    if isinstance(value, Node):
        return value
    if isinstance(value, str):
        return Literal(value, lang=language, datatype=datatype)
    if isinstance(value, bool):
        raise UnsupportedNodeTypeError(value)
    if isinstance(value, (int, float, Decimal)):
        return Literal(number_to_text(value), datatype=datatype)
    raise UnsupportedNodeTypeError(value)


def to_terms(
    value: NodeInput,
    language: str | None = None,
    datatype: URIRef | None = None,
) -> list[Node]:
    """Coerce a value or an ordered collection of values into a list of terms.

    Nested lists are flattened in order. A top-level None yields an empty
    list; a None inside a list is rejected like any other unsupported value.
    """
    if value is None:
        return []
    terms: list[Node] = []
    _collect_terms(value, terms, language, datatype)
    return terms


def _collect_terms(
    value: NodeInput,
    terms: list[Node],
    language: str | None,
    datatype: URIRef | None,
) -> None:
    if isinstance(value, (list, tuple)):
        for item in value:
            _collect_terms(item, terms, language, datatype)
        return
    terms.append(to_term(value, language=language, datatype=datatype))


def to_predicates(value: Node | Sequence[Node] | None) -> list[Node] | None:
    """Normalise a predicate argument.

    Predicates are never coerced from strings, a bare string would silently
    become a Literal. None is returned unchanged and means "any predicate".
    """
    if value is None:
        return None
    items = list(value) if isinstance(value, (list, tuple)) else [value]
    for item in items:
        if not isinstance(item, Node):
            raise UnsupportedNodeTypeError(
                item, f"Predicates must be RDF terms, got {type(item).__name__}"
            )
    return items


def blank_node(label: str | None = None) -> BNode:
    """Create a blank node, with a fresh label unless one is given."""
    return BNode(label) if label is not None else BNode()


def term_value(term: Node | None) -> str | None:
    """Textual value of a term (IRI, blank node label or lexical form).

    The default graph has no IRI of its own, so its value is "".
    """
    if term is None:
        return None
    if term == DEFAULT_GRAPH:
        return ""
    return str(term)
