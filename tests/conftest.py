"""Shared fixtures for ccparse tests."""

import os

import pytest


@pytest.fixture
def full_message():
    """Message with a header, two body paragraphs and two footers."""
    return """\
fix(typo): correct minor typos in code

see the issue for details

on typos fixed.

Reviewed-by: Z
Refs #133
"""


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run from an empty directory with no CCPARSE_* environment."""
    for name in list(os.environ):
        if name.startswith("CCPARSE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
