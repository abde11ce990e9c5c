from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from eventcard.config import get_settings
from eventcard.logging_config import setup_logging
from eventcard.services.event_card import render_event_card
from eventcard.services.event_loader import load_events
from eventcard.services.exceptions import EventCardError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render event cards from a JSON events file")
    parser.add_argument("events", type=Path, help="JSON file with one event or a list of events")
    parser.add_argument("-o", "--output", type=Path, help="Write HTML here instead of stdout")
    parser.add_argument("--locale", help="Locale for labels (defaults to EVENTCARD_LOCALE)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level)
    args = _build_parser().parse_args(argv)

    try:
        events = load_events(args.events)
        html = "\n".join(render_event_card(event, locale=args.locale) for event in events)
    except EventCardError as exc:
        logger.error("Event card build failed: %s", exc)
        return 1

    if args.output:
        try:
            args.output.write_text(html + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write %s: %s", args.output, exc)
            return 1
        logger.info("Wrote %d event cards to %s", len(events), args.output)
    else:
        sys.stdout.write(html + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
