"""Inline entity references in chat text: extraction, resolution and rendering

Chat replies embed records as tokens like ``<u:1>`` (employee) or
``<e:2>`` (event). Extraction resolves every token through an async lookup;
rendering splices the resolved labels back into the text as a flat list of
segments.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from .observability import logger, metrics, track_latency


# ============ Entity Kinds ============

class EntityKind(str, Enum):
    """Kinds of records a token can reference"""
    PERSON = "person"
    EVENT = "event"

    @property
    def prefix(self) -> str:
        return _KIND_PREFIXES[self]

    @property
    def display_field(self) -> str:
        return _KIND_DISPLAY_FIELDS[self]

    @property
    def fallback_word(self) -> str:
        return _KIND_FALLBACK_WORDS[self]

    @property
    def pattern(self) -> re.Pattern[str]:
        return _KIND_PATTERNS[self]


_KIND_PREFIXES = {
    EntityKind.PERSON: "u",
    EntityKind.EVENT: "e",
}

_KIND_DISPLAY_FIELDS = {
    EntityKind.PERSON: "name",
    EntityKind.EVENT: "title",
}

_KIND_FALLBACK_WORDS = {
    EntityKind.PERSON: "Сотрудник",
    EntityKind.EVENT: "Событие",
}

# Id group needs at least one digit, so "<u:>" or "<u:x>" never match
_KIND_PATTERNS = {
    kind: re.compile(rf"<{re.escape(prefix)}:(\d+)>", re.IGNORECASE)
    for kind, prefix in _KIND_PREFIXES.items()
}


Lookup = Callable[[str], Awaitable[Optional[Any]]]


# ============ Reference and Segment Types ============

@dataclass
class EntityReference:
    """One token found in a text blob"""
    kind: EntityKind
    id: str
    raw: str
    start: int
    record: Optional[Any] = None
    name: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.record is not None

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        return f"{self.kind.fallback_word} #{self.id}"


@dataclass(frozen=True)
class TextSegment:
    """Literal text between references"""
    text: str


@dataclass(frozen=True)
class EntitySegment:
    """Clickable reference to a record"""
    kind: EntityKind
    id: str
    label: str
    raw: str


Segment = Union[TextSegment, EntitySegment]


# ============ Extraction ============

def _display_name(kind: EntityKind, record: Any) -> Optional[str]:
    if record is None:
        return None
    if isinstance(record, dict):
        value = record.get(kind.display_field)
    else:
        value = getattr(record, kind.display_field, None)
    return value if isinstance(value, str) and value else None


async def _resolve(lookup: Optional[Lookup], kind: EntityKind, entity_id: str) -> Optional[Any]:
    if lookup is None:
        return None
    try:
        return await lookup(entity_id)
    except Exception as e:
        logger.warning(f"Lookup failed for {kind.value} #{entity_id}: {e}")
        return None


async def extract_references(
    content: str,
    lookups: Mapping[EntityKind, Lookup],
) -> list[EntityReference]:
    """
    Find every reference token in `content` and resolve it.

    Tokens are scanned per kind, so the result lists all persons first,
    then all events; each entry carries its source offset. Lookups run
    concurrently and a miss (or a failing lookup) leaves the reference
    unresolved.
    """
    matches: list[tuple[EntityKind, re.Match[str]]] = []
    for kind in EntityKind:
        for match in kind.pattern.finditer(content):
            matches.append((kind, match))

    if not matches:
        return []

    records = await asyncio.gather(
        *(_resolve(lookups.get(kind), kind, match.group(1)) for kind, match in matches)
    )

    references = []
    for (kind, match), record in zip(matches, records):
        if record is None:
            metrics.increment("lookup_miss_count")
        references.append(EntityReference(
            kind=kind,
            id=match.group(1),
            raw=match.group(0),
            start=match.start(),
            record=record,
            name=_display_name(kind, record),
        ))
    return references


# ============ Rendering ============

def render_segments(content: str, references: list[EntityReference]) -> list[Segment]:
    """
    Splice references into `content` as a flat list of segments.

    References are consumed in source order with a forward-only cursor,
    so repeated identical tokens map to successive occurrences. Joining
    text segments with each entity's `raw` token gives back `content`.
    """
    segments: list[Segment] = []
    cursor = 0

    for ref in sorted(references, key=lambda r: r.start):
        index = content.find(ref.raw, cursor)
        if index == -1:
            logger.debug(f"Reference {ref.raw} not found after offset {cursor}, skipped")
            continue

        if index > cursor:
            segments.append(TextSegment(text=content[cursor:index]))

        segments.append(EntitySegment(
            kind=ref.kind,
            id=ref.id,
            label=ref.label,
            raw=ref.raw,
        ))
        cursor = index + len(ref.raw)

    if cursor < len(content):
        segments.append(TextSegment(text=content[cursor:]))

    return segments


def segments_to_source(segments: list[Segment]) -> str:
    """Rebuild the original text from segments"""
    return "".join(s.text if isinstance(s, TextSegment) else s.raw for s in segments)


# ============ Cancellable Resolution ============

class RenderScope:
    """Cancellation flag for one resolution run"""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


@track_latency("render")
async def resolve_segments(
    content: str,
    lookups: Mapping[EntityKind, Lookup],
    scope: Optional[RenderScope] = None,
) -> Optional[list[Segment]]:
    """
    Extract, resolve and render `content`.

    Returns None when `scope` was cancelled while lookups were pending;
    the late result is dropped without error.
    """
    references = await extract_references(content, lookups)
    if scope is not None and scope.cancelled:
        logger.debug("Render cancelled, discarding resolved references")
        return None
    return render_segments(content, references)
