"""
Preset table tests.
"""

from pokerscore.engine.hand_detector import Category
from pokerscore.presets import DEFAULT_PRESET, PRESETS, get_preset, list_presets


def test_list_presets():
    assert set(list_presets()) == {"standard", "compact"}
    assert DEFAULT_PRESET in list_presets()


def test_get_preset_is_case_insensitive():
    assert get_preset("Standard") is PRESETS["standard"]


def test_unknown_preset():
    assert get_preset("nope") is None


def test_standard_values():
    values = get_preset("standard").base_values
    assert values[Category.HIGH_CARD] == 0
    assert values[Category.PAIR] == 100
    assert values[Category.STRAIGHT_FLUSH] == 800


def test_compact_values():
    values = get_preset("compact").base_values
    assert [values[c] for c in Category] == [0, 10, 20, 30, 40, 50, 60, 70, 80]
