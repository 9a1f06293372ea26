"""
Double-quoted string literal scanner
"""

import re
from typing import Iterator, List, Tuple

from ..models.literal import ContextWindow, SourceBuffer, StringLiteral

# A quoted run without unescaped quotes; `\"` does not terminate the literal
LITERAL_PATTERN = re.compile(r'"([^"\\]*(?:\\.[^"\\]*)*)"')

CONTEXT_LINES = 4


def iter_literals(text: str) -> Iterator[StringLiteral]:
    """Yield every literal in `text` in document order"""
    for match in LITERAL_PATTERN.finditer(text):
        yield StringLiteral(
            text=match.group(1),
            start_offset=match.start(1),
            end_offset=match.end(1),
        )


def scan_literals(buffer: SourceBuffer) -> List[StringLiteral]:
    return list(iter_literals(buffer.text))


def context_window(text: str, literal: StringLiteral, size: int = CONTEXT_LINES) -> ContextWindow:
    """
    Build the context window of a literal

    The preceding lines are taken from the text before the opening quote, so
    the nearest entry is the literal's own line up to the quote.
    """
    quote = literal.quote_offset

    line_start = text.rfind('\n', 0, quote) + 1
    line_end = text.find('\n', quote)
    if line_end == -1:
        line_end = len(text)
    current_line = text[line_start:line_end].strip()

    return ContextWindow(current_line=current_line, preceding=preceding_lines(text, quote, size))


def preceding_lines(text: str, end: int, size: int = CONTEXT_LINES) -> Tuple[str, ...]:
    """Up to `size` trimmed lines of `text[:end]`, nearest first"""
    if end <= 0:
        return ()
    # A trailing newline does not start another line
    if text[end - 1] == '\n':
        end -= 1

    lines: List[str] = []
    while len(lines) < size:
        start = text.rfind('\n', 0, end) + 1
        lines.append(text[start:end].strip())
        if start == 0:
            break
        end = start - 1
    return tuple(lines)
