"""
Shared fixtures for the texrunner test suite.
"""

from __future__ import annotations

import pytest

from texrunner import config


SAMPLE_LOG = (
    b"This is pdfTeX, Version 3.141592653-2.6-1.40.25 (TeX Live 2023) (preloaded format=pdflatex)\n"
    b" restricted \\write18 enabled.\n"
    b"entering extended mode\n"
    b"(./paper.tex\n"
    b"LaTeX2e <2022-11-01> patch level 1\n"
    b"! Undefined control sequence.\n"
    b"l.12 \\foo\n"
    b"         bar\n"
    b"! Missing $ inserted.\n"
    b"<inserted text> \n"
    b"                $\n"
    b"l.20 x^\n"
    b"       2\n"
    b"! LaTeX Error: File `noexist.sty' not found.\n"
    b"\n"
    b"Overfull \\hbox (12.3pt too wide) in paragraph at lines 5--6\n"
    b"[]\\OT1/cmr/m/n/10 Some long line\n"
    b"\n"
    b"Underfull \\hbox (badness 10000) in paragraph at lines 30--31\n"
    b"[1] [2] )\n"
    b"Output written on paper.pdf (2 pages, 12345 bytes).\n"
    b"Transcript written on paper.log.\n"
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's own configuration out of the tests."""
    monkeypatch.delenv("TEXRUNNER_CONFIG", raising=False)
    monkeypatch.setattr(config, "_USER_CONFIG_FILE", tmp_path / "no-config.yaml")


@pytest.fixture
def sample_log() -> bytes:
    return SAMPLE_LOG


@pytest.fixture
def sample_log_file(tmp_path):
    """The sample transcript written to a .log file."""
    path = tmp_path / "paper.log"
    path.write_bytes(SAMPLE_LOG)
    return path
