from enum import Enum


class SessionType(str, Enum):
    speaker = "speaker"
    participant = "participant"
