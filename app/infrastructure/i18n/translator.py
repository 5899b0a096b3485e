"""Translation service for retrieving translated messages."""

from typing import Dict

from infrastructure.i18n.catalog import FALLBACK_CODE
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import TranslationCatalog, TranslationKey
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating messages into the active language.

    Loads catalogs lazily, one language at a time, and falls back to the
    fallback language for keys a bundle does not define.

    Attributes:
        loader: YAMLTranslationLoader for loading message bundles.
        catalogs: Cache of loaded TranslationCatalogs by language code.
        fallback_code: Language to use when a key is not found.
    """

    def __init__(
        self,
        loader: YAMLTranslationLoader,
        fallback_code: str = FALLBACK_CODE,
    ):
        self.loader = loader
        self.fallback_code = fallback_code
        self.catalogs: Dict[str, TranslationCatalog] = {}
        logger.info("initialized_translator", fallback_code=fallback_code)

    def load_locale(self, code: str) -> None:
        """Load specific language from loader.

        Args:
            code: Language code to load.

        Raises:
            FileNotFoundError: If the bundle does not exist.
        """
        self.catalogs[code] = self.loader.load(code)
        logger.info("loaded_locale_translations", code=code)

    def ensure_loaded(self, code: str) -> bool:
        """Load a language unless already loaded.

        Returns:
            True if a catalog for the language is available afterwards.
        """
        if code in self.catalogs:
            return True
        try:
            self.load_locale(code)
        except FileNotFoundError:
            logger.info("translation_bundle_missing", code=code)
            return False
        return True

    def translate_message(self, key: TranslationKey, code: str) -> str:
        """Retrieve a translated message.

        Falls back to fallback_code if the key is not found in the requested
        language.

        Args:
            key: TranslationKey identifying the message.
            code: Language code to translate to.

        Returns:
            Translated message string.

        Raises:
            KeyError: If key not found in requested or fallback language.
        """
        catalog = self.catalogs.get(code)
        message = catalog.get_message(key) if catalog else None

        if not message and code != self.fallback_code:
            self.ensure_loaded(self.fallback_code)
            fallback_catalog = self.catalogs.get(self.fallback_code)
            message = fallback_catalog.get_message(key) if fallback_catalog else None

            if message:
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_code=code,
                    fallback_code=self.fallback_code,
                )

        if not message:
            logger.error(
                "translation_not_found",
                key=str(key),
                code=code,
                fallback_code=self.fallback_code,
            )
            raise KeyError(
                f"Translation not found for key {key} in {code} or fallback {self.fallback_code}"
            )

        return message
