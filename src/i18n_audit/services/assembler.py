"""
Key set assembly across source files
"""

import json
import logging
from typing import AbstractSet, Callable, FrozenSet, Iterable, Optional, Set

from ..config.overrides import OverrideLists
from ..models.literal import SourceBuffer
from ..utils.file_utils import PathLike, read_text
from .classifier import library_candidates, ui_candidates

logger = logging.getLogger(__name__)


def decode_literal(text: str) -> str:
    """Decode JSON-compatible escapes; literals with other escapes stay raw"""
    if '\\' not in text:
        return text
    try:
        return json.loads(f'"{text}"', strict=False)
    except json.JSONDecodeError:
        return text


def load_buffers(paths: Iterable[PathLike]) -> Iterable[SourceBuffer]:
    for path in paths:
        yield SourceBuffer(label=str(path), text=read_text(path))


class KeySetAssembler:
    """Builds the canonical UI and library key sets"""

    def __init__(self, overrides: Optional[OverrideLists] = None, decode_escapes: bool = False):
        self.overrides = overrides or OverrideLists()
        self.decode_escapes = decode_escapes

    def _union(self, buffers: Iterable[SourceBuffer], candidates: Callable[[SourceBuffer], Set[str]]) -> Set[str]:
        keys: Set[str] = set()
        count = 0
        for buffer in buffers:
            found = candidates(buffer)
            logger.debug(f"{buffer.label}: {len(found)} candidate keys")
            keys |= found
            count += 1
        logger.info(f"Scanned {count} source files, {len(keys)} distinct candidate keys")
        return keys

    def _finalize(self, keys: Iterable[str]) -> Set[str]:
        if not self.decode_escapes:
            return set(keys)
        return {decode_literal(k) for k in keys}

    def build_ui_keys(
        self,
        buffers: Iterable[SourceBuffer],
        css_exclusions: AbstractSet[str] = frozenset(),
    ) -> FrozenSet[str]:
        """
        Application key set

        Classifier inclusions minus CSS class/id names minus the fixed
        exclusions, plus the fixed UI keys.
        """
        keys = self._union(buffers, ui_candidates)
        kept = {k for k in keys if k not in css_exclusions and k not in self.overrides.excluded}
        logger.info(f"UI keys: {len(keys) - len(kept)} removed by CSS/fixed exclusions")
        result = self._finalize(kept)
        result |= self.overrides.ui_keys
        return frozenset(result)

    def build_library_keys(self, buffers: Iterable[SourceBuffer]) -> FrozenSet[str]:
        """Library key set: classifier inclusions plus the fixed library keys"""
        result = self._finalize(self._union(buffers, library_candidates))
        result |= self.overrides.library_keys
        return frozenset(result)

    def collect_ui_keys(self, paths: Iterable[PathLike], css_exclusions: AbstractSet[str] = frozenset()) -> FrozenSet[str]:
        return self.build_ui_keys(load_buffers(paths), css_exclusions)

    def collect_library_keys(self, paths: Iterable[PathLike]) -> FrozenSet[str]:
        return self.build_library_keys(load_buffers(paths))
