"""Fetch a couple of events by id and the latest page of events from the Gamma API."""

from pathlib import Path

import structlog

from gammafetch import GammaClient, GammaError
from gammafetch.config import configure_logging, get_settings

log = structlog.get_logger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def main() -> None:
    settings = get_settings(config_dir=CONFIG_DIR)
    configure_logging(settings)

    with GammaClient.from_settings(settings) as client:
        print("=== Fetch events by IDs ===")
        try:
            response = client.fetch_events_by_ids([2890, 2891])
        except GammaError as e:
            log.error("fetch_by_ids_failed", error=str(e))
        else:
            print(f"Fetched {len(response)} events")
            for event in response.events:
                print(f"  Event #{event.id}: {event.title}")
                print(f"    Markets: {len(event.markets)}")

        print("\n=== Fetch latest events with pagination ===")
        try:
            response = client.fetch_events_page(0, 5, ascending=False)
        except GammaError as e:
            log.error("fetch_page_failed", error=str(e))
        else:
            print(f"Fetched {len(response)} events")
            for event in response.events:
                print(f"  Event #{event.id}: {event.title}")


if __name__ == "__main__":
    main()
