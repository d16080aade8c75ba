# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
JSON-lines session runner.

Serves a SessionController over stdin/stdout against a document file::

    $ swatchmerge design.json --output merged.json
    {"type": "scan", "threshold": 20}
    {"type":"scan-result","groups":[...],"threshold":20}
    {"type": "merge", "groupIndices": [0], "targetHex": "#00FF00"}
    {"type":"merge-done","changed":2,"styleCreated":false,"styleName":null}
    {"type": "close"}

The document (with any created styles) is written back when the session
closes or input ends.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from swatchmerge.config import SessionConfig
from swatchmerge.document import MemoryDocument
from swatchmerge.runtime import SessionController, dumps_message, loads_message, to_error


logger = logging.getLogger("swatchmerge")


class StreamChannel:
    """Posts each response as one JSON line."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def post_message(self, payload: dict) -> None:
        self.stream.write(dumps_message(payload) + "\n")
        self.stream.flush()


def run_session(
    document: MemoryDocument,
    stdin: TextIO,
    stdout: TextIO,
    config: Optional[SessionConfig] = None,
) -> SessionController:
    """Feed stdin lines to a session until close or EOF."""
    channel = StreamChannel(stdout)
    session = SessionController(document, channel=channel, config=config)

    for line in stdin:
        line = line.strip()
        if not line:
            continue
        try:
            message = loads_message(line)
        except ValueError as e:
            channel.post_message(to_error(f"Invalid message: {e}"))
            continue
        session.receive(message)
        if session.closed:
            break
    return session


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="swatchmerge",
        description="Scan a design document for similar colors and merge them.",
    )
    parser.add_argument("document", type=Path, help="Document JSON file")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Where to write the document on exit (default: overwrite input)",
    )
    parser.add_argument(
        "-t", "--threshold", type=float, default=None,
        help="Default grouping threshold when a request omits one",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (stderr)")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)

    config = SessionConfig.from_env()
    if args.threshold is not None:
        config = SessionConfig(default_threshold=args.threshold, log_level=config.log_level)

    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, (args.log_level or config.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    document = MemoryDocument.from_dict(json.loads(args.document.read_text()))
    logger.info("Loaded %s (%d nodes)", args.document, len(document.find_all()))

    run_session(document, sys.stdin, sys.stdout, config)

    output = args.output or args.document
    output.write_text(json.dumps(document.to_dict(), indent=2))
    logger.info("Wrote %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
