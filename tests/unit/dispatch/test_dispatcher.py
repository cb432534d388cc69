"""
Dispatcher Tests
"""

from unittest.mock import MagicMock, patch

import pytest

from sitter_parse.dispatch import Dispatcher
from sitter_parse.exceptions import SourceNotFoundError, UnsupportedLanguageError
from sitter_parse.parsing import ExtensionRegistry, GrammarLoader


@pytest.fixture
def underlying_loader():
    return MagicMock(return_value=MagicMock())


@pytest.fixture
def dispatcher(underlying_loader):
    return Dispatcher(registry=ExtensionRegistry(), loader=GrammarLoader(loader=underlying_loader))


def test_missing_file_checked_before_extension(dispatcher, tmp_path, underlying_loader):
    with pytest.raises(SourceNotFoundError):
        dispatcher.parse_file(tmp_path / "missing.unknown")

    underlying_loader.assert_not_called()


def test_directory_with_known_extension_is_not_found(dispatcher, tmp_path, underlying_loader):
    folder = tmp_path / "pkg.py"
    folder.mkdir()

    with pytest.raises(SourceNotFoundError):
        dispatcher.parse_file(folder)

    underlying_loader.assert_not_called()


def test_unsupported_extension_skips_loader(dispatcher, write_source, underlying_loader):
    with pytest.raises(UnsupportedLanguageError):
        dispatcher.parse_file(write_source("README.md", "# hi"))

    underlying_loader.assert_not_called()


@patch("sitter_parse.parsing.ast_tree.Parser")
def test_parse_file_uses_mapped_grammar(
    mock_parser_class, dispatcher, write_source, underlying_loader, fake_node, fake_tree
):
    mock_parser_class.return_value.parse.return_value = fake_tree(fake_node("module"))
    path = write_source("script.PY", "pass\n")

    tree = dispatcher.parse_file(path)

    underlying_loader.assert_called_once_with("python")
    assert tree.source.file_path == path
    assert tree.source.grammar == "python"
    mock_parser_class.return_value.parse.assert_called_once_with(b"pass\n")
