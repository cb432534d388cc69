"""
End-to-end tests against real tree-sitter grammars from tree-sitter-language-pack.
"""

import json

import pytest
from typer.testing import CliRunner

from sitter_parse.cli import app
from sitter_parse.config import Settings
from sitter_parse.dispatch import Dispatcher
from sitter_parse.parsing import ExtensionRegistry, GrammarLoader
from sitter_parse.rendering import collect_summaries, render_sexp

runner = CliRunner()


@pytest.fixture
def dispatcher():
    return Dispatcher(registry=ExtensionRegistry(), loader=GrammarLoader())


class TestJsonGrammar:
    def test_object_dump(self, write_source):
        path = write_source("doc.json", '{"a":1}')

        result = runner.invoke(app, ["parse", path, "--json"])

        assert result.exit_code == 0
        dump = json.loads(result.stdout)
        types = [n["type"] for n in dump["nodes"]]
        assert dump["file"] == path
        assert dump["root"]["type"] == "document"
        assert dump["nodes"][0] == dump["root"]
        for expected in ("object", "pair", "string", "number"):
            assert expected in types

    def test_number_document(self, write_source):
        path = write_source("n.json", "42")

        result = runner.invoke(app, ["parse", path, "--json"])

        assert result.exit_code == 0
        dump = json.loads(result.stdout)
        assert dump["file"] == path
        assert dump["root"]["childCount"] >= 1
        assert dump["root"]["startPosition"] == {"row": 0, "column": 0}
        assert "number" in [n["type"] for n in dump["nodes"]]

    def test_text_mode_nesting(self, write_source):
        path = write_source("doc.json", '{"a":1}')

        result = runner.invoke(app, ["parse", path])

        assert result.exit_code == 0
        text = result.stdout.strip()
        assert text.startswith("(document (object (pair key: (string")
        assert "value: (number)" in text

    @pytest.mark.parametrize(
        "content",
        [
            '{"a": [1, true, null], "b": {"c": "d"}}',
            "[1, 2, [3, [4]]]",
        ],
    )
    def test_text_mode_matches_tree_sitter(self, dispatcher, write_source, content):
        tree = dispatcher.parse_file(write_source("doc.json", content))

        assert render_sexp(tree.root) == str(tree.root)

    def test_one_summary_per_node(self, dispatcher, write_source):
        tree = dispatcher.parse_file(write_source("doc.json", '{"a": [1, 2, 3]}'))

        assert len(collect_summaries(tree.root)) == tree.node_count()

    def test_large_input_capped(self, dispatcher, write_source):
        content = "[" + ", ".join(str(i) for i in range(3000)) + "]"
        tree = dispatcher.parse_file(write_source("big.json", content))

        assert tree.node_count() > 2000
        assert len(collect_summaries(tree.root)) == 2000


class TestSyntaxErrors:
    def test_invalid_javascript_still_succeeds(self, write_source):
        path = write_source("bad.js", "let x = ;")

        result = runner.invoke(app, ["parse", path, "--json"])

        assert result.exit_code == 0
        dump = json.loads(result.stdout)
        assert dump["root"]["type"] == "program"

    def test_invalid_javascript_has_error_nodes(self, dispatcher, write_source):
        tree = dispatcher.parse_file(write_source("bad.js", "let x = ;"))

        assert tree.has_error is True
        assert len(tree.error_nodes()) >= 1

    def test_summary_reports_errors(self, write_source):
        path = write_source("bad.js", "let x = ;")

        result = runner.invoke(app, ["parse", path, "--summary"])

        assert result.exit_code == 0
        assert "Has errors: yes" in result.stdout
        assert "Grammar: javascript" in result.stdout


class TestOtherGrammars:
    @pytest.mark.parametrize(
        "name, content, root_type",
        [
            ("m.py", "def f(a):\n    return a + 1\n", "module"),
            ("m.ts", "const x: number = 1;\n", "program"),
            ("m.tsx", "const el = <div />;\n", "program"),
            ("m.rs", "fn main() {}\n", "source_file"),
        ],
    )
    def test_root_types(self, dispatcher, write_source, name, content, root_type):
        tree = dispatcher.parse_file(write_source(name, content))

        assert tree.root.type == root_type
        assert tree.has_error is False

    def test_doctor_loads_builtin_grammars(self):
        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 0


def test_shared_grammar_loaded_once(write_source):
    loader = GrammarLoader()
    dispatcher = Dispatcher(registry=ExtensionRegistry(), loader=loader)

    dispatcher.parse_file(write_source("a.js", "1;"))
    handle = loader.load("javascript")
    dispatcher.parse_file(write_source("b.mjs", "2;"))

    assert loader.loaded == ["javascript"]
    assert loader.load("javascript") is handle


def test_settings_extra_extension(monkeypatch, write_source):
    monkeypatch.setenv("SITTER_PARSE_EXTRA_EXTENSIONS", '{"jsonc": "json"}')

    tree = Dispatcher.from_settings(Settings()).parse_file(write_source("x.jsonc", "[]"))

    assert tree.source.grammar == "json"
    assert tree.root.type == "document"
