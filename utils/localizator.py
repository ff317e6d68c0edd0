import json
from pathlib import Path
from typing import Optional

import config


class Localizator:
    localization_dir = Path(__file__).resolve().parent.parent / "l10n"

    @staticmethod
    def get_text(key: str, lang: Optional[str] = None) -> str:
        """
        Get localized text for the given key.

        Args:
            key: Localization key
            lang: Optional language code (e.g., "de", "en").
                  If None, uses config.BOT_LANGUAGE.

        Returns:
            Localized text string

        Raises:
            KeyError: If the key is missing from the language file
        """
        language = lang if lang is not None else config.BOT_LANGUAGE
        localization_file = Localizator.localization_dir / f"{language}.json"

        with open(localization_file, "r", encoding="UTF-8") as f:
            data = json.loads(f.read())
            return data[key]
