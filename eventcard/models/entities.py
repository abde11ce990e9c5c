from __future__ import annotations

import datetime as dt
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from eventcard.models.enums import SessionType

OTHER_SESSION_TAG = "other"


class ContentModel(BaseModel):
    """Immutable record read from the content layer.

    Fields accept both their snake_case names and the camelCase keys used by
    the site data files.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Speaker(ContentModel):
    title: str


class Participant(ContentModel):
    title: str
    twitter: str | None = None
    linkedin: str | None = None


class SessionBase(ContentModel):
    image: str = ""
    title: str = ""
    description: str = ""
    topics: tuple[str, ...] = ()
    slides_url: str | None = Field(default=None, alias="slidesUrl")
    video_url: str | None = Field(default=None, alias="videoUrl")


class SpeakerSession(SessionBase):
    type: Literal["speaker"] = "speaker"
    speaker: Speaker


class ParticipantSession(SessionBase):
    type: Literal["participant"] = "participant"
    participants: tuple[Participant, ...] = ()


class OtherSession(SessionBase):
    type: str


def _session_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if kind in (SessionType.speaker.value, SessionType.participant.value):
        return kind
    return OTHER_SESSION_TAG


Session = Annotated[
    Union[
        Annotated[SpeakerSession, Tag(SessionType.speaker.value)],
        Annotated[ParticipantSession, Tag(SessionType.participant.value)],
        Annotated[OtherSession, Tag(OTHER_SESSION_TAG)],
    ],
    Discriminator(_session_tag),
]


class Event(ContentModel):
    id: str
    title: str
    summary: str = ""
    image: str = ""
    external_url: str = Field(alias="externalUrl")
    location: str = ""
    date: dt.datetime | dt.date = Field(union_mode="left_to_right")
    sessions: tuple[Session, ...] = ()

    @property
    def speaker_sessions(self) -> list[SpeakerSession]:
        return [s for s in self.sessions if s.type == SessionType.speaker]

    @property
    def participant_sessions(self) -> list[ParticipantSession]:
        return [s for s in self.sessions if s.type == SessionType.participant]
