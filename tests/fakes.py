"""
Fake implementations and sample data for testing.

RecordingQuadStore wraps the real in-memory store and records every call,
so tests can check that navigation only reads and that list() re-reads the
store on every walk.
"""

from __future__ import annotations

from typing import Any

from rdflib import RDF, BNode, Literal, Namespace
from rdflib.term import Node

from quadnav.graph.store import MemoryQuadStore, Quad

SDO = Namespace("http://schema.org/")
PERSON = Namespace("http://localhost:8080/data/person/")
EX = Namespace("http://example.org/")

ADDRESS = "2311 North Los Robles Avenue, Aparment 4A"

# slug, givenName, familyName, jobTitle, has address, knows, spouse
PEOPLE: list[tuple[str, str, str | None, str, bool, list[str], str | None]] = [
    (
        "amy-farrah-fowler", "Amy", "Farrah Fowler", "neurobiologist", False,
        ["bernadette-rostenkowski", "penny", "sheldon-cooper"], None,
    ),
    (
        "bernadette-rostenkowski", "Bernadette", "Rostenkowski", "microbiologist", False,
        ["amy-farrah-fowler", "howard-wolowitz", "penny"], "howard-wolowitz",
    ),
    (
        "howard-wolowitz", "Howard", "Wolowitz", "aerospace engineer", False,
        ["bernadette-rostenkowski", "leonard-hofstadter", "rajesh-koothrappali"],
        "bernadette-rostenkowski",
    ),
    (
        "leonard-hofstadter", "Leonard", "Hofstadter", "experimental physicist", True,
        ["penny", "sheldon-cooper", "howard-wolowitz"], None,
    ),
    (
        "penny", "Penny", None, "waitress", False,
        ["leonard-hofstadter", "bernadette-rostenkowski"], None,
    ),
    (
        "rajesh-koothrappali", "Rajesh", "Koothrappali", "astrophysicist", False,
        ["howard-wolowitz", "bernadette-rostenkowski"], None,
    ),
    (
        "sheldon-cooper", "Sheldon", "Cooper", "theoretical physicist", True,
        ["amy-farrah-fowler", "leonard-hofstadter", "bernadette-rostenkowski"], None,
    ),
    (
        "stuart-bloom", "Stuart", "Bloom", "comic book store owner", False,
        ["rajesh-koothrappali", "bernadette-rostenkowski"], None,
    ),
]

# Total quads produced by build_people_quads()
PEOPLE_QUAD_COUNT = 60


def build_people_quads() -> list[Quad]:
    """Quads describing the sample people, in a fixed insertion order."""
    quads: list[Quad] = []
    for slug, given, family, job, has_address, knows, spouse in PEOPLE:
        person = PERSON[slug]
        quads.append(Quad(person, RDF.type, SDO.Person))
        quads.append(Quad(person, SDO.givenName, Literal(given)))
        if family:
            quads.append(Quad(person, SDO.familyName, Literal(family)))
        quads.append(Quad(person, SDO.jobTitle, Literal(job)))
        if has_address:
            address = BNode()
            quads.append(Quad(person, SDO.address, address))
            quads.append(Quad(address, SDO.streetAddress, Literal(ADDRESS)))
            quads.append(Quad(address, SDO.addressLocality, Literal("Pasadena")))
        for friend in knows:
            quads.append(Quad(person, SDO.knows, PERSON[friend]))
        if spouse:
            quads.append(Quad(person, SDO.spouse, PERSON[spouse]))
    return quads


def build_list_quads(
    values: list[str] | None = None,
    start: Node | None = None,
) -> list[Quad]:
    """An RDF Collection hung off `start` via ex:list."""
    values = ["1", "2", "3"] if values is None else values
    start = start if start is not None else BNode()
    if not values:
        return [Quad(start, EX.list, RDF.nil)]
    items = [BNode() for _ in values]
    quads = [Quad(start, EX.list, items[0])]
    for index, value in enumerate(values):
        rest = items[index + 1] if index + 1 < len(items) else RDF.nil
        quads.append(Quad(items[index], RDF.first, Literal(value)))
        quads.append(Quad(items[index], RDF.rest, rest))
    return quads


class RecordingQuadStore(MemoryQuadStore):
    """MemoryQuadStore that records match/add/delete calls."""

    def __init__(self, quads: Any = None) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        super().__init__(quads)
        self.calls.clear()

    def match(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        obj: Node | None = None,
        graph: Node | None = None,
    ) -> list[Quad]:
        self.calls.append(("match", (subject, predicate, obj, graph)))
        return super().match(subject, predicate, obj, graph)

    def add(self, quad: Any) -> None:
        self.calls.append(("add", tuple(quad)))
        super().add(quad)

    def delete(self, quad: Any) -> None:
        self.calls.append(("delete", tuple(quad)))
        super().delete(quad)

    def count(self, kind: str) -> int:
        """How many calls of the given kind were recorded."""
        return sum(1 for name, _ in self.calls if name == kind)
