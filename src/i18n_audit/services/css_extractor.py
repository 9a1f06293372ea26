"""
Stylesheet class/id extraction
"""

import logging
import re
from typing import Iterable, Set

from ..utils.file_utils import PathLike, read_text

logger = logging.getLogger(__name__)

CLASS_PATTERN = re.compile(r"(?:[a-zA-Z]+\.)?\.([a-zA-Z][a-zA-Z0-9_-]*)")
ID_PATTERN = re.compile(r"(?:[a-zA-Z]+#)?#([a-zA-Z][a-zA-Z0-9_-]*)")


def extract_identifiers(css_text: str) -> Set[str]:
    """Class and id names referenced by selectors in one stylesheet"""
    identifiers: Set[str] = set()
    for line in css_text.splitlines():
        identifiers.update(CLASS_PATTERN.findall(line))
        identifiers.update(ID_PATTERN.findall(line))
    return identifiers


def extract_css_classes_and_ids(css_files: Iterable[PathLike]) -> Set[str]:
    """Union of class and id names over all stylesheet files"""
    identifiers: Set[str] = set()
    count = 0
    for path in css_files:
        identifiers |= extract_identifiers(read_text(path))
        count += 1
    logger.info(f"Extracted {len(identifiers)} CSS class/id names from {count} stylesheets")
    return identifiers
