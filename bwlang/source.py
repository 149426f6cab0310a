"""Source buffers and positions.

A :class:`Source` is the text handed to the lexer together with a label used
only when errors are displayed. Every token, AST node and error carries a
:class:`FilePosition` pointing back into it.


File: source.py
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilePosition:
    """
    A 1-based line and column plus the length of the lexeme found there.
    """
    line: int
    column: int
    length: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Source:
    """
    A text buffer to interpret and the label it is reported under.
    """
    label: str
    content: str

    @classmethod
    def from_string(cls, content: str, label: str = "<string>") -> "Source":
        """
        Wrap in-memory text.
        """
        return cls(label, content)

    @classmethod
    def from_file(cls, path: str) -> "Source":
        """
        Read a script from disk.

        Raises:
            OSError: If the file cannot be read.
        """
        with open(path, "r", encoding="utf-8") as f:
            return cls(path, f.read())

    def line(self, number: int) -> str:
        """
        Return the text of line ``number`` (1-based) or an empty string.
        """
        lines = self.content.split("\n")
        if 1 <= number <= len(lines):
            return lines[number - 1]
        return ""
