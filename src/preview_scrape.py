import argparse
import json
import logging

from minerva_watch.errors import RetryExhaustedError, TransportSetupError
from minerva_watch.logging_utils import configure_logging, logger
from minerva_watch.notifier import build_webhook_payload
from minerva_watch.scraper import fetch_page, scrape_with_retry


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scrape Minerva's status once and print it as JSON.")
    parser.add_argument(
        "--payload",
        action="store_true",
        help="Print the webhook payload that would be sent instead of the record.",
    )
    parser.add_argument(
        "--headed-debug",
        action="store_true",
        help="Run the browser headed so you can watch the page load.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable structured scraper logs while previewing.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    if args.verbose or args.headed_debug:
        configure_logging(logging.DEBUG)
    try:
        record = scrape_with_retry(lambda: fetch_page(headless=not args.headed_debug))
    except (RetryExhaustedError, TransportSetupError) as exc:
        logger.error(str(exc), extra={"event": "preview_failed"})
        return 1
    output = build_webhook_payload(record) if args.payload else record.to_dict()
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
