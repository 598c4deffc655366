"""Tests for the shared console."""

from __future__ import annotations

from tasktrack.config import OutputConfig
from tasktrack.utils.ui.console import apply_output_config, get_console


def test_console_is_shared():
    assert get_console() is get_console()


def test_color_setting_applied():
    console = get_console()
    try:
        apply_output_config(OutputConfig(color=False))
        assert console.no_color is True

        apply_output_config(OutputConfig(color=True))
        assert console.no_color is False
    finally:
        console.no_color = False
