from eventcard.models.entities import (
    Event,
    OtherSession,
    Participant,
    ParticipantSession,
    Session,
    Speaker,
    SpeakerSession,
)
from eventcard.models.enums import SessionType

__all__ = [
    "Event",
    "OtherSession",
    "Participant",
    "ParticipantSession",
    "Session",
    "SessionType",
    "Speaker",
    "SpeakerSession",
]
