"""Parser registry — detect the document style and dispatch to the right parser."""

from __future__ import annotations

import json

from aisvg.errors import SpecError
from aisvg.ir.coordinate import CoordinateSpec
from aisvg.ir.spec import Specification
from aisvg.parsers.base import Parser
from aisvg.parsers.coordinate import CoordinateParser
from aisvg.parsers.semantic import SemanticParser, strip_code_fence


def detect_type(src: str) -> str:
    """Detect the document style from source text. Returns 'semantic' or 'coordinate'."""
    try:
        doc = json.loads(strip_code_fence(src))
    except json.JSONDecodeError:
        return "semantic"  # let the parser report the error
    if isinstance(doc, dict) and "viewBox" in doc and "canvasSize" not in doc:
        return "coordinate"
    return "semantic"


_PARSERS: dict[str, type[Parser]] = {
    "semantic": SemanticParser,
    "coordinate": CoordinateParser,
}


def parser_for(doc_type: str) -> Parser:
    parser_cls = _PARSERS.get(doc_type)
    if parser_cls is None:
        raise SpecError(f"Unsupported document type: {doc_type}")
    return parser_cls()


def parse(src: str) -> Specification | CoordinateSpec:
    """Auto-detect document style and parse it."""
    return parser_for(detect_type(src)).parse(src)


__all__ = [
    "CoordinateParser",
    "Parser",
    "SemanticParser",
    "detect_type",
    "parse",
    "parser_for",
    "strip_code_fence",
]
