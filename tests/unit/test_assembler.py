import json

import pytest

from i18n_audit.config.overrides import OverrideLists
from i18n_audit.models.literal import SourceBuffer
from i18n_audit.services.assembler import KeySetAssembler, decode_literal
from i18n_audit.utils.errors import AuditError

NO_OVERRIDES = OverrideLists(excluded=frozenset(), ui_keys=frozenset(), library_keys=frozenset())


def buffers(*texts):
    return [SourceBuffer(f"file{i}.rs", text) for i, text in enumerate(texts)]


class TestBuildUiKeys:
    def test_union_across_files(self):
        assembler = KeySetAssembler(NO_OVERRIDES)
        keys = assembler.build_ui_keys(buffers('let a = "Save";\n', 'let b = "Delete";\nlet c = "Save";\n'))
        assert keys == {"Save", "Delete"}

    def test_css_exclusion_beats_text_macro(self):
        source = 'let x = "btn-primary";\nhtml! { { text!(ctx, "btn-primary") } }\n'
        assembler = KeySetAssembler(NO_OVERRIDES)

        assert assembler.build_ui_keys(buffers(source)) == {"btn-primary"}
        assert assembler.build_ui_keys(buffers(source), {"btn-primary"}) == set()

    def test_fixed_lists(self):
        overrides = OverrideLists(
            excluded=frozenset({"application/json"}),
            ui_keys=frozenset({"Token"}),
            library_keys=frozenset({"Add"}),
        )
        assembler = KeySetAssembler(overrides)
        keys = assembler.build_ui_keys(buffers('let ct = "application/json";\nlet t = "Save";\n'))
        assert keys == {"Save", "Token"}

    def test_forced_keys_survive_css_exclusion(self):
        overrides = OverrideLists(excluded=frozenset(), ui_keys=frozenset({"card"}), library_keys=frozenset())
        assert KeySetAssembler(overrides).build_ui_keys([], {"card"}) == {"card"}

    def test_format_template_is_not_a_key(self):
        keys = KeySetAssembler(NO_OVERRIDES).build_ui_keys(buffers('let s = format!("{} items", n);\n'))
        assert "{} items" not in keys

    def test_default_overrides(self):
        keys = KeySetAssembler().build_ui_keys(buffers('let ct = "Content-Type";\n'))
        assert "Content-Type" not in keys
        assert "PDF" in keys


class TestBuildLibraryKeys:
    def test_classified_and_forced(self):
        overrides = OverrideLists(excluded=frozenset({"Cancel"}), ui_keys=frozenset(), library_keys=frozenset({"Add"}))
        source = 'let msg = ViewString::Key("Cancel".to_string());\nlet css = "hidden-class";\n'
        keys = KeySetAssembler(overrides).build_library_keys(buffers(source))
        # fixed exclusions only apply to the application set
        assert keys == {"Cancel", "Add"}


class TestEscapes:
    SOURCE = 'let a = "Say \\"hi\\"";\n'

    def test_raw_by_default(self):
        keys = KeySetAssembler(NO_OVERRIDES).build_ui_keys(buffers(self.SOURCE))
        assert keys == {'Say \\"hi\\"'}

    def test_decoded_when_enabled(self):
        keys = KeySetAssembler(NO_OVERRIDES, decode_escapes=True).build_ui_keys(buffers(self.SOURCE))
        assert keys == {'Say "hi"'}

    @pytest.mark.parametrize("raw,decoded", [
        ("plain", "plain"),
        ("tab\\there", "tab\there"),
        ("\\u0041BC", "ABC"),
        ("\\u{AC00}", "\\u{AC00}"),
        ("it\\'s", "it\\'s"),
    ])
    def test_decode_literal(self, raw, decoded):
        assert decode_literal(raw) == decoded


class TestCollectFromFiles:
    def test_reads_files(self, tmp_path):
        path = tmp_path / "main.rs"
        path.write_text('let a = "Save";\n', encoding="utf-8")
        assert KeySetAssembler(NO_OVERRIDES).collect_ui_keys([path]) == {"Save"}

    def test_unreadable_file_is_fatal(self, tmp_path):
        with pytest.raises(AuditError):
            KeySetAssembler(NO_OVERRIDES).collect_library_keys([tmp_path / "missing.rs"])


class TestOverrideListsFromFile:
    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"ui_keys": ["Token"]}), encoding="utf-8")

        overrides = OverrideLists.from_file(path)
        assert overrides.ui_keys == {"Token"}
        assert overrides.excluded == OverrideLists().excluded
        assert "Add" in overrides.library_keys

    @pytest.mark.parametrize("content", ['["Token"]', '{"excluded": "node"}', '{"ui_keys": [1]}', "{"])
    def test_invalid_file(self, tmp_path, content):
        path = tmp_path / "overrides.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(AuditError):
            OverrideLists.from_file(path)
