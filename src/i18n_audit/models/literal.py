"""
Source text data models
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SourceBuffer:
    """Text of one source file plus the label (usually the path) it came from"""
    label: str
    text: str


@dataclass(frozen=True)
class StringLiteral:
    """
    A double-quoted literal found in a SourceBuffer

    `text` is the content between the quotes with escapes left verbatim.
    `start_offset` is the offset of the first content character and
    `end_offset` the offset of the closing quote.
    """
    text: str
    start_offset: int
    end_offset: int

    @property
    def quote_offset(self) -> int:
        """Offset of the opening quote"""
        return self.start_offset - 1


@dataclass(frozen=True)
class ContextWindow:
    """
    Lines around a literal, trimmed

    `preceding` is ordered nearest-first: index 0 is the text on the literal's
    own line before its opening quote (empty when the literal starts the line
    after indentation), followed by earlier lines of the buffer.
    """
    current_line: str
    preceding: Tuple[str, ...] = ()

    def line(self, index: int) -> Optional[str]:
        """Preceding line at `index`, or None past the start of the buffer"""
        if 0 <= index < len(self.preceding):
            return self.preceding[index]
        return None

    def first_non_blank(self) -> Optional[str]:
        return next((l for l in self.preceding if l), None)
