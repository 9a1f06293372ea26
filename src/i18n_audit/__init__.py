"""
i18n key coverage audit
"""

__version__ = '0.1.0'
