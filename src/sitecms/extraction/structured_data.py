"""Reference resolution over the serialized data graph embedded in listing pages.

The exporter embeds page data as a flat JSON table in a
``<script type="framer/handover">`` tag. Most values are integer indices into
that table, and some indices point at ``{"value": ...}`` wrappers. Graphs can
nest and may contain cycles, so every walk is bounded by ``MAX_DEPTH``.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import re
from typing import Any, Callable, Iterator, Mapping

LOGGER = logging.getLogger(__name__)

MAX_DEPTH = 15

_HANDOVER_RE = re.compile(
    r"<script[^>]*type=[\"']framer/handover[\"'][^>]*>(.+?)</script>",
    re.IGNORECASE | re.DOTALL,
)

GraphLiteral = str | int | float | bool


@dataclass(frozen=True, slots=True)
class PersonGraphKeys:
    """Field names the listing page uses for person entries."""

    slug: str = "TAIvpALDu"
    name: str = "Hohw1kgab"
    position: str = "MY38jWI86"


DEFAULT_PERSON_KEYS = PersonGraphKeys()


@dataclass(frozen=True, slots=True)
class PersonEntry:
    name: str | None
    position: str | None


class StructuredGraph:
    """Flat reference table mapping integer ids to nodes."""

    def __init__(self, nodes: Mapping[int, Any]) -> None:
        self._nodes = dict(nodes)

    @classmethod
    def from_json_value(cls, payload: Any) -> "StructuredGraph":
        if isinstance(payload, list):
            return cls(dict(enumerate(payload)))
        if isinstance(payload, dict):
            nodes: dict[int, Any] = {}
            for key, value in payload.items():
                try:
                    nodes[int(key)] = value
                except (TypeError, ValueError):
                    continue
            return cls(nodes)
        raise ValueError(f"Unsupported graph payload type: {type(payload).__name__}")

    def __contains__(self, ref: object) -> bool:
        return _is_index(ref) and ref in self._nodes

    def __getitem__(self, ref: int) -> Any:
        return self._nodes[ref]

    def __len__(self) -> int:
        return len(self._nodes)

    def roots(self) -> list[Any]:
        """Top-level nodes in id order; the starting point of a graph search."""

        return [self._nodes[key] for key in sorted(self._nodes)]


def _is_index(ref: object) -> bool:
    return isinstance(ref, int) and not isinstance(ref, bool)


def resolve(graph: StructuredGraph, ref: Any, *, max_depth: int = MAX_DEPTH) -> GraphLiteral | None:
    """Follow *ref* through the table until a string literal is reached.

    A string ref is returned unchanged. An index that lands on a non-string,
    non-wrapper node yields the index itself. Anything else, and any chain
    longer than *max_depth*, yields None.
    """

    current = ref
    for _ in range(max_depth + 1):
        if isinstance(current, str):
            return current
        if not _is_index(current) or current not in graph:
            return None

        node = graph[current]
        if isinstance(node, dict) and "value" in node:
            current = node["value"]
            continue
        if isinstance(node, str):
            return node
        return current

    LOGGER.debug("Reference chain from %r exceeded depth %d", ref, max_depth)
    return None


def find_record(
    graph: StructuredGraph,
    predicate: Callable[[dict[str, Any]], bool],
    *,
    max_depth: int = MAX_DEPTH,
) -> dict[str, Any] | None:
    """Depth-first pre-order search for the first object matching *predicate*."""

    return next(_walk(graph.roots(), predicate, 0, max_depth), None)


def _walk(
    node: Any,
    predicate: Callable[[dict[str, Any]], bool],
    depth: int,
    max_depth: int,
) -> Iterator[dict[str, Any]]:
    if depth > max_depth:
        return
    if isinstance(node, list):
        for item in node:
            yield from _walk(item, predicate, depth + 1, max_depth)
    elif isinstance(node, dict):
        if predicate(node):
            yield node
        for value in node.values():
            yield from _walk(value, predicate, depth + 1, max_depth)


def find_person(
    graph: StructuredGraph,
    slug: str,
    keys: PersonGraphKeys = DEFAULT_PERSON_KEYS,
) -> PersonEntry | None:
    """Look up the name and position published for *slug* on the listing page."""

    def _matches(node: dict[str, Any]) -> bool:
        if keys.slug not in node or keys.name not in node:
            return False
        return resolve(graph, node[keys.slug]) == slug

    record = find_record(graph, _matches)
    if record is None:
        return None

    name = resolve(graph, record[keys.name])
    position = resolve(graph, record[keys.position]) if record.get(keys.position) is not None else None
    return PersonEntry(
        name=name if isinstance(name, str) and name.strip() else None,
        position=position if isinstance(position, str) and position.strip() else None,
    )


def load_handover_graph(html: str) -> StructuredGraph | None:
    """Parse the embedded handover payload, or return None when unusable."""

    match = _HANDOVER_RE.search(html)
    if match is None:
        LOGGER.info("No structured data payload found in listing page")
        return None

    try:
        payload = json.loads(match.group(1))
        return StructuredGraph.from_json_value(payload)
    except ValueError as exc:
        LOGGER.warning("Ignoring malformed structured data payload: %s", exc)
        return None
