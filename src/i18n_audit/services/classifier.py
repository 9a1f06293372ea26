"""
Context classifier for string literals

Decides from line-level context whether a literal is a translation key.
Application sources are included by default and excluded by a list of
structural markers; library sources are excluded unless a key reference or a
text macro call on component properties is found right before the literal.
"""

from enum import Enum
from typing import Set

from ..models.literal import ContextWindow, SourceBuffer
from .literal_scanner import context_window, iter_literals

# Call-site markers of the UI framework
TEXT_MACRO = "text!("
LIBRARY_TEXT_MACRO = "text!"
KEY_REFERENCE = "ViewString::Key"
PROPS_ACCESS = "ctx.props()"

# Markers of literals that are not UI text
GRAPHQL_ATTRIBUTE = "#[graphql("
TYPE_ATTRIBUTE = "type="
ERROR_MACRO = "anyhow!("
DISPLAY_MACRO = "write!("
FORMAT_MACRO = "format!("
CURRENT_LINE_MARKERS = (
    "expect(",
    "feature =",
    "#[serde(rename =",
    "#[strum(serialize =",
)

REPORT_ID_PREFIX = "report-"
YEAR_FORMAT = "%Y"
HANGUL_FIRST = '\uac00'
HANGUL_LAST = '\ud7a3'


class Verdict(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


def is_noise(text: str) -> bool:
    """Literal-only exclusion checks that need no context"""
    if not any(c.isalpha() for c in text):
        return True
    if text[0] in '/#' and len(text) > 1 and text[1] != ' ':
        return True
    if YEAR_FORMAT in text:
        return True
    if any(HANGUL_FIRST <= c <= HANGUL_LAST for c in text):
        return True
    if text.startswith(REPORT_ID_PREFIX):
        return True
    return len(text) == 1


def classify_ui(text: str, window: ContextWindow) -> Verdict:
    """Classify a literal from an application source file"""
    if is_noise(text):
        return Verdict.EXCLUDE

    if any(marker in window.current_line for marker in CURRENT_LINE_MARKERS):
        return Verdict.EXCLUDE

    nearest = window.line(0)
    if nearest is not None and TEXT_MACRO in nearest:
        return Verdict.INCLUDE

    for i, line in enumerate(window.preceding):
        if GRAPHQL_ATTRIBUTE in line:
            return Verdict.EXCLUDE
        if i == 0 and TYPE_ATTRIBUTE in line:
            return Verdict.EXCLUDE
        if i <= 1 and ERROR_MACRO in line:
            return Verdict.EXCLUDE
        if i <= 2 and DISPLAY_MACRO in line:
            return Verdict.EXCLUDE
        if FORMAT_MACRO in line and _is_format_call_site(window, i):
            return Verdict.EXCLUDE

    return Verdict.INCLUDE


def _is_format_call_site(window: ContextWindow, i: int) -> bool:
    # Walk back over a blank separator line to the macro call
    if i == 0:
        return True
    if i in (1, 2):
        return window.line(i - 1) == ''
    return False


def classify_library(text: str, window: ContextWindow) -> Verdict:
    """Classify a literal from a component library source file"""
    for i, line in enumerate(window.preceding):
        if i == 0 and KEY_REFERENCE in line:
            return Verdict.INCLUDE
        if LIBRARY_TEXT_MACRO in line:
            if i == 0:
                return Verdict.INCLUDE
            first = window.first_non_blank()
            if first is not None and PROPS_ACCESS in first:
                return Verdict.INCLUDE
    return Verdict.EXCLUDE


def _candidates(buffer: SourceBuffer, classify) -> Set[str]:
    found: Set[str] = set()
    for literal in iter_literals(buffer.text):
        if classify(literal.text, context_window(buffer.text, literal)) is Verdict.INCLUDE:
            found.add(literal.text)
    return found


def ui_candidates(buffer: SourceBuffer) -> Set[str]:
    """Translation keys used by one application source file"""
    return _candidates(buffer, classify_ui)


def library_candidates(buffer: SourceBuffer) -> Set[str]:
    """Translation keys used by one component library source file"""
    return _candidates(buffer, classify_library)

