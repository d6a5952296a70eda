"""Base parser protocol."""

from __future__ import annotations

from typing import Any, Protocol

from aisvg.ir.coordinate import CoordinateSpec
from aisvg.ir.spec import Specification


class Parser(Protocol):
    """Protocol that all document parsers must implement."""

    def parse(self, src: str) -> Specification | CoordinateSpec:
        """Parse source text into a specification."""
        ...

    def parse_mapping(self, doc: Any) -> Specification | CoordinateSpec:
        """Build a specification from an already decoded JSON document."""
        ...
