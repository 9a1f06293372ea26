"""
Pytest configuration and fixtures
"""

import json
import pytest
from pathlib import Path
from typing import Dict

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from i18n_audit.config.settings import Settings, SourceSettings, LocaleSettings

AUDIT_ENV_VARS = [
    'AUDIT_UI_LABEL', 'AUDIT_UI_PATH', 'AUDIT_UI_URL', 'AUDIT_UI_REF',
    'AUDIT_LIBRARY_LABEL', 'AUDIT_LIBRARY_PATH', 'AUDIT_LIBRARY_URL', 'AUDIT_LIBRARY_REF',
    'AUDIT_SSH_KEY', 'AUDIT_LOCALE_FILES', 'AUDIT_SOURCE_DIR', 'AUDIT_STYLE_DIR',
    'AUDIT_SOURCE_EXTENSION', 'AUDIT_STYLE_EXTENSION', 'AUDIT_SKIP_DIRS', 'AUDIT_SKIP_FILES',
    'AUDIT_DECODE_ESCAPES', 'AUDIT_OVERRIDES_FILE', 'AUDIT_LOG_LEVEL',
]

UI_MAIN_RS = '''use yew::prelude::*;

fn view(ctx: &Context<Self>) -> Html {
    let x = "btn-primary";
    let title = "Delete";
    html! {
        <button class={x}>{ text!(ctx, "btn-primary") }</button>
        <span>{ text!(ctx, "Save") }</span>
    }
}

fn label(n: usize) -> String {
    format!("{} items", n)
}
'''

LIBRARY_LIB_RS = '''pub fn cancel_label() -> ViewString {
    let msg = ViewString::Key("Cancel".to_string());
    let css = "hidden-class";
    msg
}
'''


def write_files(root: Path, files: Dict[str, str]) -> None:
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')


@pytest.fixture(autouse=True)
def clean_audit_env(monkeypatch):
    """Isolate tests from AUDIT_* variables."""
    for name in AUDIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def project_tree(tmp_path: Path) -> Dict[str, Path]:
    """Application and library checkouts with locale files and a stylesheet."""
    ui_root = tmp_path / "aice-web"
    library_root = tmp_path / "frontary"

    write_files(ui_root, {
        "src/main.rs": UI_MAIN_RS,
        "src/bin/tool.rs": 'fn main() { let s = "Bin Only"; }\n',
        "src/triage/policy/data.rs": 'const DATA: &str = "Policy Data";\n',
        "static/style.css": ".btn-primary { }\n",
        "langs/en-US.json": json.dumps({"Save": "Save", "Delete": "Delete", "Cancel": "Cancel"}),
        "langs/ko-KR.json": json.dumps({"Save": "저장", "Delete": "삭제"}, ensure_ascii=False),
    })
    write_files(library_root, {"src/lib.rs": LIBRARY_LIB_RS})

    return {"ui": ui_root, "library": library_root}


@pytest.fixture
def test_settings(project_tree) -> Settings:
    """Settings pointing at the local project tree."""
    return Settings(
        ui=SourceSettings(label="aice-web", path=str(project_tree["ui"])),
        library=SourceSettings(label="frontary", path=str(project_tree["library"])),
        locales=LocaleSettings(files=["langs/en-US.json", "langs/ko-KR.json"]),
    )
