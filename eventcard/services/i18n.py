from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from eventcard.locales.messages import DEFAULT_LOCALE, MESSAGES
from eventcard.services.exceptions import TranslationNotFoundError, UnsupportedLocaleError

logger = logging.getLogger(__name__)

KEY_PREFIX = "i18n."


class Translator:
    """Looks up localized strings by dotted key, e.g. ``events.see_details``.

    Keys may carry the ``i18n.`` prefix used in site templates. A key missing
    from the requested locale falls back to the default locale.
    """

    def __init__(
        self,
        catalogue: Mapping[str, Mapping[str, Any]] = MESSAGES,
        default_locale: str = DEFAULT_LOCALE,
    ):
        if default_locale not in catalogue:
            raise UnsupportedLocaleError(f"Unknown locale: {default_locale}")
        self.catalogue = catalogue
        self.default_locale = default_locale

    @property
    def locales(self) -> list[str]:
        return sorted(self.catalogue)

    def supports(self, locale: str) -> bool:
        return locale in self.catalogue

    def translate(self, key: str, locale: str | None = None) -> str:
        locale = locale or self.default_locale
        if not self.supports(locale):
            raise UnsupportedLocaleError(f"Unknown locale: {locale}")

        path = key.removeprefix(KEY_PREFIX)
        value = self._lookup(locale, path)
        if value is None and locale != self.default_locale:
            logger.debug("No %s translation for %s, using %s", locale, path, self.default_locale)
            value = self._lookup(self.default_locale, path)
        if value is None:
            raise TranslationNotFoundError(f"Could not find i18n result for {key}")
        return value

    def _lookup(self, locale: str, path: str) -> str | None:
        node: Any = self.catalogue[locale]
        for part in path.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None
