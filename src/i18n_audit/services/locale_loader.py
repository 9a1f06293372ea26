"""
Locale file key loading
"""

import json
import logging
from typing import Set

from ..utils.errors import AuditError, ErrorType
from ..utils.file_utils import PathLike, read_text

logger = logging.getLogger(__name__)


def parse_locale_keys(content: str, source: str = '<string>') -> Set[str]:
    """
    Top-level keys of a JSON locale document

    Raises:
        AuditError: if the content is not valid JSON or its root is not an object
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise AuditError(f"JSON error in {source}", error_type=ErrorType.PARSE, cause=e)

    if not isinstance(data, dict):
        raise AuditError(
            f"Failed to extract keys from {source}. JSON object expected, got {type(data).__name__}.",
            error_type=ErrorType.PARSE,
        )
    return set(data.keys())


def extract_keys_from_json(path: PathLike) -> Set[str]:
    """Load a locale file and return its key set"""
    keys = parse_locale_keys(read_text(path), str(path))
    logger.info(f"Loaded {len(keys)} keys from {path}")
    return keys
