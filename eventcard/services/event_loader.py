from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from eventcard.models import Event
from eventcard.services.exceptions import InvalidEventError

logger = logging.getLogger(__name__)

_events_adapter = TypeAdapter(list[Event])


def parse_events(data: object, source: str = "<data>") -> list[Event]:
    """Validate one event object or a list of them."""
    if isinstance(data, dict):
        data = [data]
    try:
        return _events_adapter.validate_python(data)
    except ValidationError as exc:
        raise InvalidEventError(f"Invalid event data in {source}: {exc}") from exc


def load_events(path: Path) -> list[Event]:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InvalidEventError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InvalidEventError(f"Malformed JSON in {path}: {exc}") from exc

    events = parse_events(data, source=str(path))
    logger.info("Loaded %d events from %s", len(events), path)
    return events
