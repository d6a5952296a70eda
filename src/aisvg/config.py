"""Centralized configuration for aisvg."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class RenderConfig:
    """Configuration for the layout and rendering pipeline."""

    output_dir: Path = field(default_factory=lambda: Path("diagrams"))
    draw_order: str = "dependency"
    verbose: bool = False
    log_json: bool = False
