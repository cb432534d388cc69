"""
File dispatch: extension -> grammar -> tree.
"""

from pathlib import Path

from sitter_parse.config import Settings, get_settings
from sitter_parse.exceptions import SourceNotFoundError
from sitter_parse.observability import get_logger
from sitter_parse.parsing import ExtensionRegistry, GrammarLoader, SourceFile, SyntaxTree, get_loader

logger = get_logger(__name__)


class Dispatcher:
    """
    Runs one file through the registry, loader and parser.

    Order matters: the file must exist before the extension is checked,
    and the extension must be supported before any grammar is loaded.
    """

    def __init__(
        self,
        registry: ExtensionRegistry,
        loader: GrammarLoader,
        encoding: str = "utf-8",
    ):
        self.registry = registry
        self.loader = loader
        self.encoding = encoding

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Dispatcher":
        settings = settings or get_settings()
        return cls(
            registry=ExtensionRegistry(settings.grammars.extra_extensions),
            loader=get_loader(),
            encoding=settings.grammars.encoding,
        )

    def parse_file(self, file_path: str | Path) -> SyntaxTree:
        """
        Parse a file with the grammar its extension maps to.

        Raises:
            SourceNotFoundError: File missing
            UnsupportedLanguageError: Extension not in the registry
            GrammarLoadError: Grammar could not be loaded
            ParseFatalError: Parser failure
        """
        if not Path(file_path).is_file():
            raise SourceNotFoundError(str(file_path))

        identifier = self.registry.lookup_path(file_path)
        handle = self.loader.load(identifier)
        source = SourceFile.from_file(file_path, grammar=identifier, encoding=self.encoding)

        logger.debug("dispatching", file=str(file_path), grammar=identifier)
        return SyntaxTree.parse(source, handle)
