#!/usr/bin/env python3
"""Regenerate the canonical entity records from the published HTML entity list.

Prints one ``{"entity": ..., "character": ...}`` record per character as JSON,
choosing the lexicographically largest entity name for each character. The
output can be diffed against the table htmlescaper builds at import time:

  python tools/gen_entities.py > entities.json
  python tools/gen_entities.py --input entities.w3c.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from urllib.request import urlopen

from htmlescaper.entities import build_entity_table, entity_records, parse_w3c_entities

ENTITIES_URL = "https://www.w3.org/TR/html52/entities.json"

logger = logging.getLogger("gen_entities")


def _load(path: str | None) -> dict:
    if path:
        logger.info("reading %s", path)
        return json.loads(Path(path).read_text(encoding="utf-8"))

    logger.info("fetching %s", ENTITIES_URL)
    with urlopen(ENTITIES_URL) as response:
        return json.load(response)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--input", help="Read a local copy of entities.json instead of fetching it")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    data = _load(args.input)
    records = entity_records(parse_w3c_entities(data))
    table = build_entity_table(records)
    logger.info("%d entities, %d characters, %d single-character entries", len(data), len(records), len(table))

    json.dump(records, sys.stdout, ensure_ascii=False, indent=1)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
