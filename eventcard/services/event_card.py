"""Event card rendering.

Every public function returns ``markupsafe.Markup``: text fields of the event
(titles, summary, location, topics, participant names, URLs) are escaped by the
templates, while ``image`` fields and icons are pre-built markup and are
emitted as-is.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from markupsafe import Markup

from eventcard.config import get_settings
from eventcard.models import Event, Participant, ParticipantSession, SpeakerSession
from eventcard.services.exceptions import UnsupportedLocaleError
from eventcard.services.i18n import Translator
from eventcard.services.icons import IconSet, get_icons
from eventcard.utils.datetime import format_date_short, is_past_event
from eventcard.utils.templates import render_template

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 100

Translate = Callable[[str], str]


def render_session_card(content: str) -> Markup:
    return render_template("session_card.html.j2", content=Markup(content))


def render_topic(topic: str) -> Markup:
    return render_template("topic.html.j2", topic=topic)


def render_participants(participants: Iterable[Participant]) -> Markup:
    return Markup(", ").join(
        render_template("participant.html.j2", participant=participant) for participant in participants
    )


def render_links(session: SpeakerSession | ParticipantSession, icons: IconSet, t: Translate) -> Markup:
    if not session.slides_url and not session.video_url:
        return Markup("")
    return render_template("links.html.j2", session=session, icons=icons, t=t)


class EventCardRenderer:
    def __init__(
        self,
        icons: IconSet,
        translator: Translator,
        locale: str | None = None,
        now: datetime | None = None,
    ):
        if locale is not None and not translator.supports(locale):
            raise UnsupportedLocaleError(f"Unknown locale: {locale}")
        self.icons = icons
        self.translator = translator
        self.locale = locale
        self.now = now

    def translate(self, key: str) -> str:
        return self.translator.translate(key, self.locale)

    def render(self, event: Event) -> Markup:
        if is_past_event(event, self.now):
            button_label = self.translate("events.see_details")
        else:
            button_label = self.translate("events.see_whos_joining")

        session_cards = [self._speaker_card(event, s) for s in event.speaker_sessions]
        session_cards += [self._participant_card(event, s) for s in event.participant_sessions]
        logger.debug("Rendering event %s with %d session cards", event.id, len(session_cards))

        return render_template(
            "event_card.html.j2",
            event=event,
            image=Markup(event.image),
            icons=self.icons,
            date=format_date_short(event.date),
            button_label=button_label,
            session_cards=session_cards,
        )

    def _session_context(self, event: Event, session: SpeakerSession | ParticipantSession) -> dict:
        return {
            "session": session,
            "external_url": event.external_url,
            "image": Markup(session.image),
            "icons": self.icons,
            "t": self.translate,
            "max_length": DESCRIPTION_MAX_LENGTH,
            "topics": [render_topic(topic) for topic in session.topics],
        }

    def _speaker_card(self, event: Event, session: SpeakerSession) -> Markup:
        content = render_template(
            "speaker_session.html.j2",
            links=render_links(session, self.icons, self.translate),
            **self._session_context(event, session),
        )
        return render_session_card(content)

    def _participant_card(self, event: Event, session: ParticipantSession) -> Markup:
        content = render_template(
            "participant_session.html.j2",
            participants=render_participants(session.participants),
            **self._session_context(event, session),
        )
        return render_session_card(content)


def render_event_card(
    event: Event,
    locale: str | None = None,
    now: datetime | None = None,
) -> Markup:
    locale = locale or get_settings().default_locale
    return EventCardRenderer(get_icons(), Translator(), locale=locale, now=now).render(event)
