"""
Reconciliation report model
"""

from dataclasses import dataclass, field
from typing import AbstractSet, List


@dataclass(frozen=True)
class Report:
    """
    Pairwise difference of two key sets

    `only_in_a` holds A - B (keys of A that B is missing), `only_in_b` holds
    B - A. Both lists are sorted.
    """
    source_a: str
    source_b: str
    only_in_a: List[str] = field(default_factory=list)
    only_in_b: List[str] = field(default_factory=list)

    @classmethod
    def from_sets(cls, source_a: str, keys_a: AbstractSet[str], source_b: str, keys_b: AbstractSet[str]) -> 'Report':
        return cls(
            source_a=source_a,
            source_b=source_b,
            only_in_a=sorted(keys_a - keys_b),
            only_in_b=sorted(keys_b - keys_a),
        )

    @property
    def is_clean(self) -> bool:
        return not self.only_in_a and not self.only_in_b

    def swapped(self) -> 'Report':
        return Report(self.source_b, self.source_a, list(self.only_in_b), list(self.only_in_a))

    def render(self) -> str:
        """Render the report as a text block"""
        lines = [f"🔎 {self.source_a} vs {self.source_b}"]
        lines.extend(_render_missing(self.source_a, self.source_b, self.only_in_a))
        lines.extend(_render_missing(self.source_b, self.source_a, self.only_in_b))
        return "\n".join(lines)


def _render_missing(present_in: str, missing_from: str, keys: List[str]) -> List[str]:
    if not keys:
        return [f"✅ No keys from {present_in} are missing in {missing_from}"]
    lines = [f"❌ {len(keys)} keys from {present_in} are missing in {missing_from}:"]
    lines.extend(f"   - {key}" for key in keys)
    return lines
