"""
Main application entry point
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import OverrideLists, Settings
from .models.report import Report
from .services.assembler import KeySetAssembler
from .services.css_extractor import extract_css_classes_and_ids
from .services.locale_loader import extract_keys_from_json
from .services.repo_service import RepoManager
from .services.reporter import reconcile_all, render_reports
from .utils.errors import AuditError
from .utils.file_utils import get_files_with_extension

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class I18nAudit:
    """Scans both source trees and reconciles their keys with the locale files"""

    def __init__(self, settings: Settings, overrides: Optional[OverrideLists] = None):
        self.settings = settings
        self.overrides = overrides or OverrideLists()
        self.assembler = KeySetAssembler(self.overrides, decode_escapes=settings.scan.decode_escapes)

    def run(self, repos: RepoManager) -> List[Report]:
        settings = self.settings
        scan = settings.scan

        if settings.needs_clone and settings.ssh_key:
            repos.setup_ssh_agent(settings.ssh_key)

        ui_root = repos.resolve(settings.ui)
        library_root = repos.resolve(settings.library)

        # Load every input before building any report
        locales = []
        for locale_file in settings.locales.files:
            path = Path(locale_file)
            if not path.is_absolute():
                path = ui_root / path
            locales.append((locale_file, extract_keys_from_json(path)))

        ui_files = get_files_with_extension(
            ui_root / scan.source_dir, scan.source_extension, scan.skip_dirs, scan.skip_files
        )
        css_files = get_files_with_extension(
            ui_root / scan.style_dir, scan.style_extension, scan.skip_dirs, scan.skip_files
        )
        library_files = get_files_with_extension(
            library_root, scan.source_extension, scan.skip_dirs, scan.skip_files
        )
        logger.info(
            f"Found {len(ui_files)} {settings.ui.label} sources, {len(css_files)} stylesheets, "
            f"{len(library_files)} {settings.library.label} sources"
        )

        css_names = extract_css_classes_and_ids(css_files)
        ui_keys = self.assembler.collect_ui_keys(ui_files, css_names)
        library_keys = self.assembler.collect_library_keys(library_files)
        logger.info(f"{settings.ui.label}: {len(ui_keys)} keys, {settings.library.label}: {len(library_keys)} keys")

        if not scan.decode_escapes:
            escaped = sorted(k for k in ui_keys | library_keys if '\\' in k)
            if escaped:
                logger.warning(
                    f"{len(escaped)} keys contain escape sequences and are compared undecoded: "
                    f"{', '.join(escaped[:5])}"
                )

        combined_label = f"{settings.ui.label} + {settings.library.label}"
        return reconcile_all(
            (settings.ui.label, ui_keys),
            locales,
            combined=(combined_label, ui_keys | library_keys),
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='i18n-audit',
        description="Compare translation keys used by the UI sources with the locale files",
    )
    parser.add_argument('--ui-path', help="Local checkout of the application (skips cloning)")
    parser.add_argument('--ui-url', help="Application repository URL")
    parser.add_argument('--ui-ref', help="Branch, tag or commit to check out after cloning the application")
    parser.add_argument('--library-path', help="Local checkout of the component library (skips cloning)")
    parser.add_argument('--library-url', help="Component library repository URL")
    parser.add_argument('--library-ref', help="Branch, tag or commit to check out after cloning the library")
    parser.add_argument('--ssh-key', help="Private key added to ssh-agent before cloning")
    parser.add_argument(
        '--locale', action='append', dest='locales', metavar='FILE',
        help="Locale JSON file, relative to the application root (repeatable)",
    )
    parser.add_argument('--overrides', help="JSON file with excluded/ui_keys/library_keys lists")
    parser.add_argument(
        '--decode-escapes', action='store_true', default=None,
        help="Decode escape sequences in source literals before comparing",
    )
    parser.add_argument('--log-level', help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command-line flags take precedence over environment settings"""
    ui = dataclasses.replace(
        settings.ui,
        path=args.ui_path or settings.ui.path,
        url=args.ui_url or settings.ui.url,
        reference=args.ui_ref or settings.ui.reference,
    )
    library = dataclasses.replace(
        settings.library,
        path=args.library_path or settings.library.path,
        url=args.library_url or settings.library.url,
        reference=args.library_ref or settings.library.reference,
    )
    locales = settings.locales
    if args.locales:
        locales = dataclasses.replace(locales, files=list(args.locales))
    scan = dataclasses.replace(
        settings.scan,
        overrides_file=args.overrides or settings.scan.overrides_file,
        decode_escapes=settings.scan.decode_escapes if args.decode_escapes is None else args.decode_escapes,
    )
    log = settings.log
    if args.log_level:
        log = dataclasses.replace(log, log_level=args.log_level)

    return dataclasses.replace(
        settings,
        ui=ui,
        library=library,
        locales=locales,
        scan=scan,
        log=log,
        ssh_key=args.ssh_key or settings.ssh_key,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the audit; returns the process exit code"""
    args = build_parser().parse_args(argv)

    # stdout carries the report only
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)

    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    logging.getLogger().setLevel(settings.log.log_level)

    try:
        overrides = OverrideLists()
        if settings.scan.overrides_file:
            overrides = OverrideLists.from_file(settings.scan.overrides_file)

        with RepoManager() as repos:
            reports = I18nAudit(settings, overrides).run(repos)
    except AuditError as e:
        logger.error(f"Audit failed: {e}")
        return 1

    print(render_reports(reports))
    return 0


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
