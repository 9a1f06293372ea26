"""
Configuration module for the i18n audit
"""

from .settings import Settings, SourceSettings, LocaleSettings, ScanSettings, LogSettings
from .overrides import OverrideLists

__all__ = [
    'Settings', 'SourceSettings', 'LocaleSettings', 'ScanSettings', 'LogSettings', 'OverrideLists',
]
