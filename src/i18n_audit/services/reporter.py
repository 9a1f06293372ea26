"""
Key set reconciliation
"""

import logging
from itertools import combinations
from typing import AbstractSet, List, Optional, Sequence, Tuple

from ..models.report import Report

logger = logging.getLogger(__name__)

NamedKeySet = Tuple[str, AbstractSet[str]]


def reconcile(source_a: str, keys_a: AbstractSet[str], source_b: str, keys_b: AbstractSet[str]) -> Report:
    report = Report.from_sets(source_a, keys_a, source_b, keys_b)
    logger.debug(
        f"{source_a} vs {source_b}: {len(report.only_in_a)} only in {source_a}, "
        f"{len(report.only_in_b)} only in {source_b}"
    )
    return report


def reconcile_all(
    ui: NamedKeySet,
    locales: Sequence[NamedKeySet],
    combined: Optional[NamedKeySet] = None,
) -> List[Report]:
    """
    Run every pairing

    Order: UI set vs each locale, combined set vs each locale (when given),
    then each pair of locale files. No pairing stops the others.
    """
    reports = [reconcile(*ui, *locale) for locale in locales]
    if combined is not None:
        reports.extend(reconcile(*combined, *locale) for locale in locales)
    reports.extend(reconcile(*a, *b) for a, b in combinations(locales, 2))

    mismatched = sum(1 for r in reports if not r.is_clean)
    logger.info(f"Reconciled {len(reports)} pairs, {mismatched} with missing keys")
    return reports


def render_reports(reports: Sequence[Report]) -> str:
    return "\n\n".join(report.render() for report in reports)
