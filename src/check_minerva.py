import argparse
import sys

from minerva_watch.pipeline import main


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scrape Minerva's status and post it to the Discord webhook.")
    parser.add_argument(
        "--skip-notify",
        action="store_true",
        help="Scrape and print the record but do not post to the webhook.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug-level logs.")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    sys.exit(main(enable_notify=not args.skip_notify, verbose=args.verbose))
