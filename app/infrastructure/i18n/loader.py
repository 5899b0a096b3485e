"""Message bundle discovery and loading.

Defines the contract for reporting which languages have a usable message
bundle, plus the YAML bundle loader used by the translator.

Bundles are YAML files named ``<domain>.<code>.yml`` (e.g.
``messages.pt_BR.yml``) holding namespaced messages:

    language:
      unsupported_code: Ignoring unsupported language code.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List

import yaml

from infrastructure.i18n.catalog import FALLBACK_CODE
from infrastructure.i18n.models import TranslationCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocaleCatalogProvider(ABC):
    """Reports the language codes for which a message bundle exists."""

    @abstractmethod
    def list_locale_codes(self) -> List[str]:
        """Return installed language codes.

        Returns:
            Codes in a stable order, English first.
        """
        pass


class StaticLocaleProvider(LocaleCatalogProvider):
    """Provider backed by a fixed list of codes.

    Useful for deployments that ship their bundles elsewhere and for tests.
    """

    def __init__(self, codes: Iterable[str]):
        self.codes = list(codes)

    def list_locale_codes(self) -> List[str]:
        return list(self.codes)


class YAMLLocaleDirectoryProvider(LocaleCatalogProvider):
    """Lists languages that have a YAML bundle in a directory.

    English is always reported, even when the directory is missing or holds
    no English bundle, because the interface strings are written in English.

    Attributes:
        locale_dir: Directory holding ``<domain>.<code>.yml`` files.
        domain: Bundle file prefix.
    """

    def __init__(self, locale_dir: Path, domain: str = "messages"):
        self.locale_dir = Path(locale_dir)
        self.domain = domain

    def list_locale_codes(self) -> List[str]:
        result = [FALLBACK_CODE]

        if not self.locale_dir.is_dir():
            logger.warning("locale_dir_missing", locale_dir=str(self.locale_dir))
            return result

        for bundle in sorted(self.locale_dir.glob(f"{self.domain}.*.yml")):
            code = bundle.name[len(self.domain) + 1 : -len(".yml")]
            if code and code not in result:
                result.append(code)

        logger.info(
            "listed_locale_dir",
            locale_dir=str(self.locale_dir),
            locale_count=len(result),
        )
        return result


class YAMLTranslationLoader:
    """Loader for YAML message bundles.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        domain: Bundle file prefix.
        cache: Optional cache of loaded catalogs (code -> catalog).
    """

    def __init__(
        self,
        translations_dir: Path,
        domain: str = "messages",
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            domain: Bundle file prefix.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.domain = domain
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            domain=domain,
            use_cache=use_cache,
        )

    def bundle_path(self, code: str) -> Path:
        return self.translations_dir / f"{self.domain}.{code}.yml"

    def load(self, code: str) -> TranslationCatalog:
        """Load the message bundle of one language.

        Args:
            code: Language code (e.g. "pt_BR").

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no bundle exists for the language.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and code in self.cache:
            return self.cache[code]

        path = self.bundle_path(code)
        if not path.is_file():
            raise FileNotFoundError(
                f"No translation bundle found for {code} in {self.translations_dir}"
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        catalog = TranslationCatalog(code=code)
        self._merge_yaml_data(catalog, data, path)

        logger.info(
            "loaded_translations",
            code=code,
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[code] = catalog

        return catalog

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data,
        source_file: Path,
    ) -> None:
        if not data:
            return

        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    namespace=namespace,
                    expected="dict",
                )
                continue
            catalog.merge({namespace: messages})
