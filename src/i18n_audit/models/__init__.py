"""
Data models for the i18n audit
"""

from .literal import SourceBuffer, StringLiteral, ContextWindow
from .report import Report

__all__ = ['SourceBuffer', 'StringLiteral', 'ContextWindow', 'Report']
