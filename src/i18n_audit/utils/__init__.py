"""
Utility modules for the i18n audit
"""

from .errors import AuditError, ErrorType
from .file_utils import get_files_with_extension, path_ends_with, read_text

__all__ = ['AuditError', 'ErrorType', 'get_files_with_extension', 'path_ends_with', 'read_text']
