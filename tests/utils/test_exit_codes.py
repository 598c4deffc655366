"""Unit tests for utils/exit_codes.py."""

from __future__ import annotations

import pytest

from tasktrack.utils import exit_codes


@pytest.mark.parametrize(
    "code,name",
    [
        (exit_codes.SUCCESS, "SUCCESS"),
        (exit_codes.ERROR_GENERAL, "ERROR_GENERAL"),
        (exit_codes.ERROR_INVALID_ARGS, "ERROR_INVALID_ARGS"),
        (exit_codes.ERROR_NETWORK, "ERROR_NETWORK"),
        (exit_codes.ERROR_NOT_FOUND, "ERROR_NOT_FOUND"),
    ],
)
def test_names(code, name):
    assert exit_codes.get_exit_code_name(code) == name


def test_unknown_code():
    assert exit_codes.get_exit_code_name(99) == "UNKNOWN(99)"
    assert exit_codes.get_exit_code_description(99) == "Unknown error"


def test_codes_are_distinct():
    codes = [
        exit_codes.SUCCESS,
        exit_codes.ERROR_GENERAL,
        exit_codes.ERROR_INVALID_ARGS,
        exit_codes.ERROR_NETWORK,
        exit_codes.ERROR_NOT_FOUND,
    ]
    assert len(set(codes)) == len(codes)


def test_network_description_mentions_server():
    assert "server" in exit_codes.get_exit_code_description(exit_codes.ERROR_NETWORK)
