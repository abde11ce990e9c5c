from __future__ import annotations

from typing import Dict

DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, Dict[str, str]]] = {
    "en": {
        "events": {
            "see_details": "See details",
            "see_whos_joining": "See who's joining",
            "talk_title": "Talk title",
            "details": "Details",
            "participant_details": "Participation details",
            "participants": "Participants",
            "slides": "Slides",
            "video": "Video",
        },
    },
    "es": {
        "events": {
            "see_details": "Ver detalles",
            "see_whos_joining": "Ver quién participa",
            "talk_title": "Título de la charla",
            "details": "Detalles",
            "participant_details": "Detalles de la participación",
            "participants": "Participantes",
            "slides": "Diapositivas",
            "video": "Vídeo",
        },
    },
}
