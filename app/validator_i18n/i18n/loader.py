"""Language pack loading interface and implementations.

A language pack supplies, at startup, one (locale, messages) pair per
supported locale. Loaders turn that data into MessageCatalogs; the registry
and resolver never see files.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Union

import yaml

from validator_i18n.i18n.exceptions import InvalidLocaleCodeError
from validator_i18n.i18n.models import LocaleCode, MessageCatalog
from validator_i18n.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LANGUAGE_PACK_DIR = Path(__file__).resolve().parent / "locales"


class LanguagePackLoader(ABC):
    """Abstract base for language pack loaders."""

    @abstractmethod
    def load_all(self) -> Dict[LocaleCode, MessageCatalog]:
        """Load catalogs for all locales in the pack.

        Returns:
            Dict mapping LocaleCode to MessageCatalog.
        """
        pass


class InMemoryLanguagePack(LanguagePackLoader):
    """Language pack built from plain dictionaries.

    Example:
        pack = InMemoryLanguagePack({
            "en": {"NotNullValidator": "'{PropertyName}' must not be empty."},
            "fr": {"NotNullValidator": "'{PropertyName}' ne doit pas avoir la valeur null."},
        })
    """

    def __init__(self, messages: Mapping[str, Mapping[str, str]]):
        """Initialize from a {locale_tag: {key: template}} mapping.

        Raises:
            InvalidLocaleCodeError: If a locale tag is malformed.
            ValueError: If two tags normalize to the same locale.
        """
        self._catalogs: Dict[LocaleCode, MessageCatalog] = {}
        for tag, templates in messages.items():
            locale = LocaleCode.parse(tag)
            if locale in self._catalogs:
                raise ValueError(f"Locale '{locale}' appears more than once")
            self._catalogs[locale] = MessageCatalog(locale=locale, messages=templates)

    def load_all(self) -> Dict[LocaleCode, MessageCatalog]:
        return dict(self._catalogs)


class YAMLLanguagePackLoader(LanguagePackLoader):
    """Loader for YAML language pack files.

    Expects files named <domain>.<locale>.yml (e.g. "validators.fr-FR.yml"),
    each holding a flat mapping of translation key to template. Files of the
    same locale are merged in name order.

    Attributes:
        directory: Path to directory containing YAML files.
    """

    def __init__(self, directory: Union[Path, str] = DEFAULT_LANGUAGE_PACK_DIR):
        """Initialize YAML language pack loader.

        Args:
            directory: Path to directory with YAML language pack files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.directory = Path(directory)

        if not self.directory.is_dir():
            raise ValueError(f"Language pack directory not found: {self.directory}")

        logger.info("initialized_yaml_loader", directory=str(self.directory))

    def load_all(self) -> Dict[LocaleCode, MessageCatalog]:
        """Load every locale found in the directory.

        Returns:
            Dict mapping each LocaleCode to its MessageCatalog.

        Raises:
            ValueError: If no language pack files are found or a file fails
                to parse.
        """
        merged: Dict[LocaleCode, Dict[str, str]] = {}
        file_count = 0

        for yaml_file in sorted(self.directory.glob("*.yml")):
            # "validators.fr-FR.yml" -> "fr-FR"
            parts = yaml_file.stem.split(".")
            if len(parts) < 2:
                logger.warning("skipped_unnamed_locale_file", file=str(yaml_file))
                continue

            try:
                locale = LocaleCode.parse(parts[-1])
            except InvalidLocaleCodeError:
                logger.warning(
                    "skipped_invalid_locale_file",
                    file=str(yaml_file),
                    locale_str=parts[-1],
                )
                continue

            data = _read_yaml(yaml_file)
            messages = merged.setdefault(locale, {})
            self._merge_yaml_data(messages, data, yaml_file)
            file_count += 1

        if not merged:
            raise ValueError(f"No language pack files found in {self.directory}")

        logger.info(
            "loaded_language_pack",
            directory=str(self.directory),
            file_count=file_count,
            locale_count=len(merged),
        )

        return {
            locale: MessageCatalog(locale=locale, messages=messages)
            for locale, messages in merged.items()
        }

    def _merge_yaml_data(
        self,
        messages: Dict[str, str],
        data: object,
        source_file: Path,
    ) -> None:
        """Merge one file's key/template pairs into ``messages``."""
        if data is None:
            return

        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for key, template in data.items():
            if not isinstance(template, str):
                logger.warning(
                    "invalid_template_value",
                    file=str(source_file),
                    key=str(key),
                    expected="str",
                )
                continue
            messages[str(key)] = template


def load_overrides(path: Union[Path, str]) -> Dict[str, Dict[str, str]]:
    """Read an overrides file of the shape {locale: {key: template}}.

    Args:
        path: Path to the YAML overrides file.

    Returns:
        Nested dict of locale tag to key/template mapping. Entries with a
        non-mapping locale section or a non-string template are skipped.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file fails to parse.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Overrides file not found: {path}")

    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Overrides file {path} must contain a mapping")

    overrides: Dict[str, Dict[str, str]] = {}
    for tag, templates in data.items():
        if not isinstance(templates, dict):
            logger.warning("invalid_overrides_section", file=str(path), locale=str(tag))
            continue
        overrides[str(tag)] = {
            str(key): template
            for key, template in templates.items()
            if isinstance(template, str)
        }

    logger.info("loaded_overrides_file", file=str(path), locale_count=len(overrides))
    return overrides


def _read_yaml(path: Path) -> object:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", file=str(path), error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e
