"""
Preset scoring tables for poker hand scoring.
Allows easy selection of the base values each category starts from.
"""

from typing import Optional

from .engine.scoring import DEFAULT_CONFIG, ScoringConfig, spaced_config


DEFAULT_PRESET = DEFAULT_CONFIG.name


# Built-in presets
PRESETS = {
    DEFAULT_PRESET: DEFAULT_CONFIG,

    # Ten-point table (Pair=10 ... Straight Flush=80); categories can overlap
    "compact": spaced_config("compact", 10),
}


def get_preset(name: str) -> Optional[ScoringConfig]:
    """Get a preset by name."""
    return PRESETS.get(name.lower())


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())
