"""Centralized configuration for arrowchart."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Placement constants for the incremental layout."""

    origin_y: int = 50
    row_spacing: int = 150
    seed_source_x: int = 100
    seed_target_x: int = 300
    fan_step: int = 250


DEFAULT_LAYOUT = LayoutConfig()
