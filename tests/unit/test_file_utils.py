from pathlib import Path

import pytest

from i18n_audit.utils.errors import AuditError, ErrorType
from i18n_audit.utils.file_utils import get_files_with_extension, path_ends_with, read_text


def touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")


class TestPathEndsWith:
    def test_component_wise(self):
        assert path_ends_with(Path("/repo/src/bin"), "src/bin")
        assert not path_ends_with(Path("/repo/mysrc/bin"), "src/bin")
        assert not path_ends_with(Path("bin"), "src/bin")
        assert not path_ends_with(Path("/repo/src"), "")


class TestGetFilesWithExtension:
    def test_recursive_and_filtered(self, tmp_path):
        touch(tmp_path, "src/main.rs", "src/view/list.rs", "src/view/list.rs.bak", "README.md")
        files = get_files_with_extension(tmp_path, "rs")
        assert [p.relative_to(tmp_path).as_posix() for p in files] == ["src/main.rs", "src/view/list.rs"]

    def test_skip_rules(self, tmp_path):
        touch(
            tmp_path,
            "src/main.rs",
            "src/bin/tool.rs",
            "src/triage/policy/data.rs",
            "src/triage/policy/view.rs",
            "src/detection/mitre.rs",
        )
        files = get_files_with_extension(
            tmp_path,
            ".rs",
            skip_dirs=["src/bin"],
            skip_files=["src/triage/policy/data.rs", "src/detection/mitre.rs"],
        )
        assert [p.relative_to(tmp_path).as_posix() for p in files] == [
            "src/main.rs",
            "src/triage/policy/view.rs",
        ]

    def test_missing_root(self, tmp_path):
        with pytest.raises(AuditError) as exc_info:
            get_files_with_extension(tmp_path / "nope", "rs")
        assert exc_info.value.error_type is ErrorType.FILE_IO


class TestReadText:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "a.rs"
        path.write_text('let s = "저장";', encoding="utf-8")
        assert read_text(path) == 'let s = "저장";'

    def test_missing_file(self, tmp_path):
        with pytest.raises(AuditError) as exc_info:
            read_text(tmp_path / "missing.rs")
        assert exc_info.value.error_type is ErrorType.FILE_IO
        assert "caused by: FileNotFoundError" in str(exc_info.value)
