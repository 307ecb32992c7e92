"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from validator_i18n.i18n import ContextLocaleProvider, OverrideStore, TranslationResolver
from tests.factories.i18n import make_registry, make_service


@pytest.fixture
def registry():
    """Registry with en (default), fr, zh-CN and de catalogs."""
    return make_registry()


@pytest.fixture
def overrides():
    return OverrideStore()


@pytest.fixture
def resolver(registry, overrides):
    return TranslationResolver(registry, overrides)


@pytest.fixture
def context_provider():
    return ContextLocaleProvider()


@pytest.fixture
def service(registry, context_provider):
    """LocalizationService reading the ambient locale from locale_scope()."""
    return make_service(registry, locale_provider=context_provider)


@pytest.fixture
def temp_language_pack_dir(tmp_path):
    """Create temporary directory with sample YAML language pack files.

    Returns a directory structure like:
    - validators.en.yml
    - extra.en.yml
    - validators.fr.yml
    - validators.fr-CA.yml
    """
    files = {
        "validators.en.yml": {
            "NotNullValidator": "'{PropertyName}' must not be empty.",
            "NotEmptyValidator": "'{PropertyName}' must not be empty.",
        },
        "extra.en.yml": {
            "CustomKey": "Custom message for '{PropertyName}'",
        },
        "validators.fr.yml": {
            "NotNullValidator": "'{PropertyName}' ne doit pas avoir la valeur null.",
        },
        "validators.fr-CA.yml": {
            "NotEmptyValidator": "'{PropertyName}' ne doit pas être vide (CA).",
        },
    }
    for name, data in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def overrides_file(tmp_path):
    """Create a YAML overrides file."""
    path = tmp_path / "overrides.yml"
    data = {
        "en": {"NotNullValidator": "Required"},
        "fr": {"NotEmptyValidator": "Obligatoire"},
    }
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path
