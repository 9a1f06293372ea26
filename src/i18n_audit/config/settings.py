"""
Configuration settings with validation
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_UI_URL = 'git@github.com:aicers/aice-web.git'
DEFAULT_LIBRARY_URL = 'https://github.com/aicers/frontary.git'


def _split_list(value: Optional[str], default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    return [x.strip() for x in value.split(',') if x.strip()]


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class SourceSettings:
    """One source tree: a local checkout or a remote to clone"""
    label: str
    path: Optional[str] = None
    url: Optional[str] = None
    reference: Optional[str] = None

    def __post_init__(self):
        if not self.label or not self.label.strip():
            raise ValueError("Source label is required")
        self.label = self.label.strip()

        # A local path wins over a remote
        self.path = self.path or None
        self.url = self.url or None
        self.reference = self.reference or None

        if not (self.path or self.url):
            raise ValueError(f"Source '{self.label}' needs a local path or a repository URL")

    @property
    def is_remote(self) -> bool:
        return self.path is None


@dataclass
class LocaleSettings:
    """Locale files, relative to the application root unless absolute"""
    files: List[str] = field(default_factory=lambda: ['langs/en-US.json', 'langs/ko-KR.json'])

    def __post_init__(self):
        if not self.files:
            raise ValueError("At least one locale file is required")


@dataclass
class ScanSettings:
    """Where and what to scan"""
    source_dir: str = 'src'
    style_dir: str = 'static'
    source_extension: str = 'rs'
    style_extension: str = 'css'
    skip_dirs: List[str] = field(default_factory=lambda: ['src/bin'])
    skip_files: List[str] = field(
        default_factory=lambda: ['src/triage/policy/data.rs', 'src/detection/mitre.rs']
    )
    decode_escapes: bool = False
    overrides_file: Optional[str] = None

    def __post_init__(self):
        self.source_extension = self.source_extension.lstrip('.')
        self.style_extension = self.style_extension.lstrip('.')
        if not self.source_extension or not self.style_extension:
            raise ValueError("File extensions must not be empty")
        self.overrides_file = self.overrides_file or None


@dataclass
class LogSettings:
    log_level: str = 'INFO'

    def __post_init__(self):
        # Validate log level
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")

        self.log_level = self.log_level.upper()


@dataclass
class Settings:
    """Main configuration settings"""
    ui: SourceSettings
    library: SourceSettings
    locales: LocaleSettings = field(default_factory=LocaleSettings)
    scan: ScanSettings = field(default_factory=ScanSettings)
    log: LogSettings = field(default_factory=LogSettings)
    ssh_key: Optional[str] = None

    @property
    def needs_clone(self) -> bool:
        return self.ui.is_remote or self.library.is_remote

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables"""
        scan_defaults = ScanSettings()
        return cls(
            ui=SourceSettings(
                label=os.getenv('AUDIT_UI_LABEL', 'aice-web'),
                path=os.getenv('AUDIT_UI_PATH'),
                url=os.getenv('AUDIT_UI_URL', DEFAULT_UI_URL),
                reference=os.getenv('AUDIT_UI_REF'),
            ),
            library=SourceSettings(
                label=os.getenv('AUDIT_LIBRARY_LABEL', 'frontary'),
                path=os.getenv('AUDIT_LIBRARY_PATH'),
                url=os.getenv('AUDIT_LIBRARY_URL', DEFAULT_LIBRARY_URL),
                reference=os.getenv('AUDIT_LIBRARY_REF'),
            ),
            locales=LocaleSettings(
                files=_split_list(os.getenv('AUDIT_LOCALE_FILES'), LocaleSettings().files)
            ),
            scan=ScanSettings(
                source_dir=os.getenv('AUDIT_SOURCE_DIR', scan_defaults.source_dir),
                style_dir=os.getenv('AUDIT_STYLE_DIR', scan_defaults.style_dir),
                source_extension=os.getenv('AUDIT_SOURCE_EXTENSION', scan_defaults.source_extension),
                style_extension=os.getenv('AUDIT_STYLE_EXTENSION', scan_defaults.style_extension),
                skip_dirs=_split_list(os.getenv('AUDIT_SKIP_DIRS'), scan_defaults.skip_dirs),
                skip_files=_split_list(os.getenv('AUDIT_SKIP_FILES'), scan_defaults.skip_files),
                decode_escapes=_env_flag('AUDIT_DECODE_ESCAPES'),
                overrides_file=os.getenv('AUDIT_OVERRIDES_FILE'),
            ),
            log=LogSettings(log_level=os.getenv('AUDIT_LOG_LEVEL', 'INFO')),
            ssh_key=os.getenv('AUDIT_SSH_KEY') or None,
        )
