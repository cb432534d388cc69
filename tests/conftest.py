"""
Global test configuration and fixtures
"""

import os

import pytest

import sitter_parse.parsing.grammar_loader as grammar_loader_module
from sitter_parse.config import reset_settings
from sitter_parse.observability import setup_logging


class FakeNode:
    """
    Minimal stand-in for tree_sitter.Node.

    Covers exactly the attributes the renderers and SyntaxTree read.
    """

    def __init__(
        self,
        type,
        children=(),
        named=True,
        fields=None,
        start=(0, 0),
        end=(0, 0),
        missing=False,
        error=False,
        text=b"",
    ):
        self.type = type
        self.children = list(children)
        self.is_named = named
        self.is_missing = missing
        self.is_error = error
        self.start_point = start
        self.end_point = end
        self.text = text
        self.start_byte = 0
        self.end_byte = len(text)
        self._fields = fields or {}

    @property
    def child_count(self):
        return len(self.children)

    @property
    def has_error(self):
        return self.is_error or self.is_missing or any(c.has_error for c in self.children)

    def field_name_for_child(self, index):
        return self._fields.get(index)


class FakeTree:
    def __init__(self, root):
        self.root_node = root


@pytest.fixture
def fake_node():
    """Factory for FakeNode trees"""
    return FakeNode


@pytest.fixture
def fake_tree():
    return FakeTree


@pytest.fixture
def write_source(tmp_path):
    """Write a source file under tmp_path and return its path as str"""

    def _write(name: str, content: str | bytes) -> str:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    """Fresh settings and grammar loader per test, without SITTER_PARSE_* leakage"""
    for key in list(os.environ):
        if key.startswith("SITTER_PARSE_"):
            monkeypatch.delenv(key)

    reset_settings()
    grammar_loader_module._loader = None
    yield
    reset_settings()
    grammar_loader_module._loader = None


# Pytest hooks
def pytest_configure(config):
    """Register markers and quiet logging"""
    setup_logging(level="WARNING", format="console")
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Tests against real tree-sitter grammars")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test path"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
