"""Tests for the opt-in compiler debug trace."""

from __future__ import annotations

import logging

import pytest

from ripley import FRAGMENT, Environment, disable_debug_log, enable_debug_log, keyed
from ripley.environment import debug


class TestTrace:
    def test_element_trace(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ripley")
        Environment().compile(["div.main", {"title": "t"}, "a", "b"])
        messages = [r.getMessage() for r in caplog.records]
        assert any(
            "HTML Element: div" in m and "'title': 't'" in m and "2 children" in m
            for m in messages
        )

    def test_fragment_trace(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ripley")
        Environment().compile(keyed("k1", [FRAGMENT, {"p": 1}, "x"]))
        assert any("Fragment" in r.getMessage() and "'k1'" in r.getMessage() for r in caplog.records)

    def test_trace_does_not_change_output(self, caplog: pytest.LogCaptureFixture) -> None:
        tree = ["ul", ["li.a", "x"], ["li", "y"]]
        quiet = Environment().compile(tree)
        caplog.set_level(logging.DEBUG, logger="ripley")
        assert Environment().compile(tree) == quiet


class TestDebugFile:
    def test_enable_writes_file(self, tmp_path) -> None:
        path = tmp_path / "ripley.debug"
        handler = enable_debug_log(path)
        try:
            Environment().compile(["section", "x"])
        finally:
            disable_debug_log(handler)
        assert "HTML Element: section" in path.read_text(encoding="utf-8")

    def test_appends(self, tmp_path) -> None:
        path = tmp_path / "ripley.debug"
        path.write_text("earlier\n", encoding="utf-8")
        handler = enable_debug_log(path)
        try:
            Environment().compile(["p"])
        finally:
            disable_debug_log(handler)
        assert path.read_text(encoding="utf-8").startswith("earlier\n")

    def test_env_file_override(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "custom.debug"
        monkeypatch.setenv("RIPLEY_DEBUG_FILE", str(path))
        handler = enable_debug_log()
        try:
            Environment().compile(["p"])
        finally:
            disable_debug_log(handler)
        assert path.exists()

    def test_disable_restores_level(self, tmp_path) -> None:
        logger = logging.getLogger("ripley")
        previous = logger.level
        logger.setLevel(logging.WARNING)
        try:
            handler = enable_debug_log(tmp_path / "ripley.debug")
            assert logger.level == logging.DEBUG
            disable_debug_log(handler)
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(previous)

    @pytest.mark.parametrize(("value", "expected"), [("1", True), ("", False)])
    def test_debug_requested(self, monkeypatch, value: str, expected: bool) -> None:
        monkeypatch.setenv("RIPLEY_DEBUG", value)
        assert debug.debug_requested() is expected

    def test_debug_requested_unset(self, monkeypatch) -> None:
        monkeypatch.delenv("RIPLEY_DEBUG", raising=False)
        assert debug.debug_requested() is False
