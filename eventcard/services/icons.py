from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path

from markupsafe import Markup

from eventcard.config import get_settings
from eventcard.services.exceptions import AssetLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IconSet:
    pin: Markup
    calendar: Markup
    slides: Markup
    video: Markup
    launch: Markup


ICON_NAMES = tuple(f.name for f in fields(IconSet))


def load_icons(directory: Path) -> IconSet:
    """Read every icon SVG from ``directory``.

    Raises AssetLoadError on the first missing or unreadable file.
    """
    directory = Path(directory)
    markup: dict[str, Markup] = {}
    for name in ICON_NAMES:
        path = directory / f"{name}.svg"
        try:
            markup[name] = Markup(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise AssetLoadError(f"Cannot load icon {name!r} from {path}: {exc}") from exc

    logger.info("Loaded %d icons from %s", len(markup), directory)
    return IconSet(**markup)


@lru_cache(maxsize=1)
def get_icons() -> IconSet:
    return load_icons(get_settings().icons_dir)
