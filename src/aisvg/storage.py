"""Saved diagrams: SVG files plus a JSON metadata log in one directory."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from aisvg.ir.coordinate import CoordinateSpec
from aisvg.ir.spec import Specification

logger = logging.getLogger(__name__)

METADATA_FILE = "metadata.json"

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_.-]")


def safe_stem(name: str) -> str:
    """Filename stem for a diagram name; never contains a path separator or leading dot."""
    stem = _UNSAFE_RE.sub("_", name).lstrip(".")
    return stem or "diagram"


@dataclass
class DiagramEntry:
    """One saved diagram as recorded in the metadata log."""

    timestamp: str
    filename: str
    name: str
    description: str
    prompt: str
    mode: str
    spec: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "filename": self.filename,
            "name": self.name,
            "description": self.description,
            "prompt": self.prompt,
            "mode": self.mode,
            "spec": self.spec,
        }


class DiagramStore:
    """Saves rendered markup and appends a metadata entry per save."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        self.metadata_path = self.root / METADATA_FILE

    def entries(self) -> list[DiagramEntry]:
        if not self.metadata_path.exists():
            return []
        try:
            raw = json.loads(self.metadata_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Corrupt metadata file '{self.metadata_path}': {e.msg}") from e
        if not isinstance(raw, list):
            raise ValueError(f"Corrupt metadata file '{self.metadata_path}': expected a list")
        try:
            return [DiagramEntry(**item) for item in raw]
        except TypeError as e:
            raise ValueError(f"Corrupt metadata file '{self.metadata_path}': {e}") from e

    def last(self) -> DiagramEntry | None:
        """The most recently saved entry, or None when nothing was saved yet."""
        entries = self.entries()
        return entries[-1] if entries else None

    def save(
        self,
        markup: str,
        spec: Specification | CoordinateSpec,
        prompt: str = "",
        mode: str = "semantic",
    ) -> Path:
        """Write ``markup`` to ``<name>_<timestamp>.svg`` and log it. Returns the file path.

        A numeric suffix keeps saves within the same second from sharing a file.
        """
        self.root.mkdir(parents=True, exist_ok=True)

        now = datetime.now(timezone.utc)
        base = f"{safe_stem(spec.name)}_{now.strftime('%Y-%m-%dT%H-%M-%S')}"
        path = self.root / f"{base}.svg"
        n = 1
        while path.exists():
            n += 1
            path = self.root / f"{base}_{n}.svg"
        filename = path.name
        path.write_text(markup, encoding="utf-8")

        entries = self.entries()
        entries.append(
            DiagramEntry(
                timestamp=now.isoformat(),
                filename=filename,
                name=spec.name,
                description=spec.description,
                prompt=prompt,
                mode=mode,
                spec=spec.to_dict(),
            )
        )
        self.metadata_path.write_text(
            json.dumps([e.to_dict() for e in entries], indent=2) + "\n",
            encoding="utf-8",
        )
        logger.info("saved %s (%d entries in log)", path, len(entries))
        return path
