"""
Lexer Configuration
===================

Options shared by the library entry points and the command-line driver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        encoding: Text encoding used when reading source files
        filename: Name reported in diagnostics. None means use the path
                  being lexed (or "<input>" for in-memory source).
        source_extensions: File suffixes the command-line driver accepts
                           as source files.
    """
    encoding: str = "utf-8"
    filename: Optional[str] = None
    source_extensions: tuple[str, ...] = (".c",)

    def __post_init__(self):
        if not self.source_extensions:
            raise ValueError("at least one source extension is required")

    def accepts(self, name: str) -> bool:
        """Return True if ``name`` ends with a recognized source extension."""
        return name.endswith(self.source_extensions)
