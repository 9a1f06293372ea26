"""
Services for the i18n audit
"""

from .assembler import KeySetAssembler
from .classifier import Verdict, classify_library, classify_ui
from .css_extractor import extract_css_classes_and_ids
from .literal_scanner import scan_literals
from .locale_loader import extract_keys_from_json
from .repo_service import RepoManager, setup_ssh_agent
from .reporter import reconcile, reconcile_all, render_reports

__all__ = [
    'KeySetAssembler', 'Verdict', 'classify_library', 'classify_ui',
    'extract_css_classes_and_ids', 'scan_literals', 'extract_keys_from_json',
    'RepoManager', 'setup_ssh_agent', 'reconcile', 'reconcile_all', 'render_reports',
]
