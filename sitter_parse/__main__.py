from sitter_parse.cli import app

app(prog_name="sitter-parse")
