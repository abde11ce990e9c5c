from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from eventcard.config import DEFAULT_ICONS_DIR, get_settings
from eventcard.models import Event
from eventcard.services.event_card import EventCardRenderer
from eventcard.services.i18n import Translator
from eventcard.services.icons import IconSet, get_icons, load_icons

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clear_caches():
    get_settings.cache_clear()
    get_icons.cache_clear()
    yield
    get_settings.cache_clear()
    get_icons.cache_clear()


@pytest.fixture
def icons() -> IconSet:
    return load_icons(DEFAULT_ICONS_DIR)


@pytest.fixture
def translator() -> Translator:
    return Translator()


@pytest.fixture
def renderer(icons: IconSet, translator: Translator) -> EventCardRenderer:
    return EventCardRenderer(icons, translator, now=NOW)


def speaker_session(
    *,
    speaker: str = "Jane",
    title: str = "Talk",
    description: str = "",
    topics: list[str] | None = None,
    **extra,
) -> dict:
    return {
        "type": "speaker",
        "image": '<img src="/jane.png" alt="">',
        "speaker": {"title": speaker},
        "title": title,
        "description": description,
        "topics": topics if topics is not None else ["ML"],
        **extra,
    }


def participant_session(
    *,
    title: str = "Panel",
    description: str = "",
    participants: list[dict] | None = None,
    topics: list[str] | None = None,
) -> dict:
    return {
        "type": "participant",
        "image": '<img src="/panel.png" alt="">',
        "title": title,
        "description": description,
        "topics": topics or [],
        "participants": participants or [],
    }


def create_event(
    *,
    title: str = "Conf",
    event_date: date = date(2023, 1, 1),
    sessions: list[dict] | None = None,
    **extra,
) -> Event:
    data = {
        "id": "conf-2023",
        "title": title,
        "summary": "Yearly conference",
        "image": '<img src="/conf.png" alt="">',
        "externalUrl": "https://conf.example.com",
        "location": "Berlin",
        "date": event_date,
        "sessions": sessions or [],
        **extra,
    }
    return Event.model_validate(data)
