"""HTML5 named character reference table for escaping.

Maps a single character to the one named reference used when escaping it
(e.g. "&" -> "&amp;"). The HTML5 list often has several names for the same
character; the lexicographically largest name is chosen so the result is
deterministic.
"""

from __future__ import annotations

import html.entities
from collections.abc import Iterable, Mapping
from typing import Any

EntityRecord = dict[str, str]


def parse_w3c_entities(data: Mapping[str, Any]) -> dict[str, str]:
    """Convert the W3C entities.json document into a name -> characters mapping.

    The published document looks like
    ``{"&amp;": {"codepoints": [38], "characters": "&"}, ...}``.
    """
    return {name: entry["characters"] for name, entry in data.items()}


def entity_records(source: Mapping[str, str]) -> list[EntityRecord]:
    """Pick one canonical entity name per decoded character.

    Args:
        source: Entity names (with or without the leading "&") mapped to the
            characters they decode to. ``html.entities.html5`` has this shape.

    Returns:
        ``{"entity": ..., "character": ...}`` records sorted by entity name.
        Entity strings always start with "&" and keep their semicolon (or lack
        of one) exactly as in the source.
    """
    chosen: dict[str, str] = {}
    for name, characters in source.items():
        entity = name if name.startswith("&") else "&" + name
        current = chosen.get(characters)
        if current is None or entity > current:
            chosen[characters] = entity

    records = [{"entity": entity, "character": character} for character, entity in chosen.items()]
    records.sort(key=lambda record: record["entity"])
    return records


def build_entity_table(records: Iterable[Mapping[str, str]]) -> dict[str, str]:
    """Load entity records into a character -> entity lookup.

    Records that decode to more than one code point (e.g. "&NotEqualTilde;")
    can never match a single character and are skipped.
    """
    table: dict[str, str] = {}
    for record in records:
        character = record["character"]
        if len(character) == 1:
            table[character] = record["entity"]
    return table


# Python ships the complete HTML5 entity list (the same data as the W3C's
# entities.json); keys look like "amp;" and "amp".
ENTITY_TABLE: dict[str, str] = build_entity_table(entity_records(html.entities.html5))


def lookup_entity(character: str) -> str | None:
    return ENTITY_TABLE.get(character)
