"""Tests for validator_i18n.i18n.loader module."""

import pytest

from validator_i18n.i18n import (
    InMemoryLanguagePack,
    InvalidLocaleCodeError,
    YAMLLanguagePackLoader,
    load_overrides,
)
from tests.factories.i18n import make_locale


@pytest.mark.unit
class TestInMemoryLanguagePack:
    """Tests for InMemoryLanguagePack."""

    def test_load_all(self):
        """Catalogs are built per normalized locale."""
        pack = InMemoryLanguagePack({"en": {"A": "a"}, "fr-fr": {"A": "fr"}})
        catalogs = pack.load_all()
        assert set(catalogs) == {make_locale("en"), make_locale("fr-FR")}
        assert catalogs[make_locale("fr-FR")].get_message("A") == "fr"

    def test_invalid_locale(self):
        """A malformed locale tag is rejected."""
        with pytest.raises(InvalidLocaleCodeError):
            InMemoryLanguagePack({"": {"A": "a"}})

    def test_duplicate_normalized_locale(self):
        """Two tags for the same locale are rejected."""
        with pytest.raises(ValueError):
            InMemoryLanguagePack({"fr-FR": {}, "fr_fr": {}})


@pytest.mark.unit
class TestYAMLLanguagePackLoader:
    """Tests for YAMLLanguagePackLoader."""

    def test_missing_directory(self, tmp_path):
        """A missing directory is rejected on construction."""
        with pytest.raises(ValueError):
            YAMLLanguagePackLoader(tmp_path / "missing")

    def test_load_all(self, temp_language_pack_dir):
        """Every locale with a file is loaded."""
        catalogs = YAMLLanguagePackLoader(temp_language_pack_dir).load_all()
        assert set(catalogs) == {
            make_locale("en"),
            make_locale("fr"),
            make_locale("fr-CA"),
        }

    def test_merges_files_of_same_locale(self, temp_language_pack_dir):
        """Files of the same locale are merged into one catalog."""
        catalogs = YAMLLanguagePackLoader(temp_language_pack_dir).load_all()
        english = catalogs[make_locale("en")]
        assert english.has_message("NotNullValidator")
        assert english.get_message("CustomKey") == "Custom message for '{PropertyName}'"

    def test_unicode_preserved(self, temp_language_pack_dir):
        """Non-ASCII templates load unchanged."""
        catalogs = YAMLLanguagePackLoader(temp_language_pack_dir).load_all()
        fr_ca = catalogs[make_locale("fr-CA")]
        assert "être" in fr_ca.get_message("NotEmptyValidator")

    def test_empty_directory(self, tmp_path):
        """A directory without language pack files is an error."""
        with pytest.raises(ValueError):
            YAMLLanguagePackLoader(tmp_path).load_all()

    def test_skips_invalid_locale_files(self, temp_language_pack_dir):
        """Files with a malformed locale in the name are skipped."""
        (temp_language_pack_dir / "validators.not_a_locale!.yml").write_text(
            "A: a\n", encoding="utf-8"
        )
        (temp_language_pack_dir / "nolocale.yml").write_text("A: a\n", encoding="utf-8")
        catalogs = YAMLLanguagePackLoader(temp_language_pack_dir).load_all()
        assert len(catalogs) == 3

    def test_skips_non_string_values(self, tmp_path):
        """Non-string template values are dropped."""
        (tmp_path / "validators.en.yml").write_text(
            "A: a\nB:\n  nested: value\nC: 3\n", encoding="utf-8"
        )
        catalog = YAMLLanguagePackLoader(tmp_path).load_all()[make_locale("en")]
        assert list(catalog.keys()) == ["A"]

    def test_non_mapping_file_ignored(self, tmp_path):
        """A file that is not a mapping contributes nothing."""
        (tmp_path / "validators.en.yml").write_text("- a\n- b\n", encoding="utf-8")
        catalog = YAMLLanguagePackLoader(tmp_path).load_all()[make_locale("en")]
        assert len(catalog) == 0

    def test_yaml_parse_error(self, tmp_path):
        """Malformed YAML raises ValueError."""
        (tmp_path / "validators.en.yml").write_text("A: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError):
            YAMLLanguagePackLoader(tmp_path).load_all()


@pytest.mark.unit
class TestLoadOverrides:
    """Tests for load_overrides()."""

    def test_load(self, overrides_file):
        """Overrides are read per locale."""
        assert load_overrides(overrides_file) == {
            "en": {"NotNullValidator": "Required"},
            "fr": {"NotEmptyValidator": "Obligatoire"},
        }

    def test_missing_file(self, tmp_path):
        """A missing overrides file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_overrides(tmp_path / "missing.yml")

    def test_empty_file(self, tmp_path):
        """An empty overrides file yields no overrides."""
        path = tmp_path / "overrides.yml"
        path.write_text("", encoding="utf-8")
        assert load_overrides(path) == {}

    def test_non_mapping_file(self, tmp_path):
        """An overrides file that is not a mapping is rejected."""
        path = tmp_path / "overrides.yml"
        path.write_text("- a\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_overrides(path)

    def test_skips_invalid_sections(self, tmp_path):
        """Locale sections that are not mappings are skipped."""
        path = tmp_path / "overrides.yml"
        path.write_text("en: just a string\nfr:\n  A: a\n  B: 2\n", encoding="utf-8")
        assert load_overrides(path) == {"fr": {"A": "a"}}
