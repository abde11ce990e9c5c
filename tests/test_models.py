import pytest
from pydantic import ValidationError

from eventcard.models import OtherSession, ParticipantSession, SessionType, SpeakerSession
from eventcard.utils.datetime import format_date_short
from tests.conftest import create_event, participant_session, speaker_session


def test_sessions_are_discriminated_by_type():
    event = create_event(
        sessions=[
            speaker_session(),
            participant_session(participants=[{"title": "A", "twitter": "a"}]),
            {"type": "workshop", "title": "Other"},
        ]
    )

    speaker, participant, other = event.sessions
    assert isinstance(speaker, SpeakerSession)
    assert isinstance(participant, ParticipantSession)
    assert isinstance(other, OtherSession)
    assert event.speaker_sessions == [speaker]
    assert event.participant_sessions == [participant]
    assert participant.participants[0].twitter == "a"
    assert speaker.type == SessionType.speaker


def test_camel_case_aliases():
    event = create_event(sessions=[speaker_session(slidesUrl="https://s", videoUrl="https://v")])

    assert event.external_url == "https://conf.example.com"
    assert event.sessions[0].slides_url == "https://s"
    assert event.sessions[0].video_url == "https://v"


def test_optional_fields_default_to_empty():
    session = SpeakerSession.model_validate({"type": "speaker", "speaker": {"title": "X"}})

    assert session.description == ""
    assert session.topics == ()
    assert session.slides_url is None
    assert ParticipantSession.model_validate({"type": "participant"}).participants == ()


def test_date_parsed_from_string():
    assert format_date_short(create_event(event_date="2023-05-04").date) == "May 4, 2023"


def test_speaker_session_requires_speaker():
    with pytest.raises(ValidationError):
        create_event(sessions=[{"type": "speaker", "title": "No speaker"}])


def test_event_requires_external_url():
    with pytest.raises(ValidationError):
        create_event(externalUrl=None)


def test_models_are_frozen():
    event = create_event()
    with pytest.raises(ValidationError):
        event.title = "changed"


def test_aware_datetime_string_keeps_offset():
    event = create_event(event_date="2023-01-01T00:00:00+05:00")

    assert event.date.utcoffset() is not None
    assert format_date_short(event.date) == "Dec 31, 2022"
