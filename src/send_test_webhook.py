import sys

from minerva_watch.errors import MinervaWatchError
from minerva_watch.logging_utils import configure_logging, logger
from minerva_watch.models import CurrentStatus, SaleEntry, StatusRecord
from minerva_watch.notifier import post_to_webhook


def main() -> int:
    configure_logging()

    sample = StatusRecord(
        current_status=CurrentStatus(
            next_location="Test Webhook: Minerva Notifications Are Working",
            arrival_time="now (test)",
        ),
        sale_schedule=[
            SaleEntry(
                sale_number="0",
                location="GitHub Actions Test",
                start_date="today",
                end_date="today",
                is_next=True,
            )
        ],
    )

    try:
        post_to_webhook(sample)
    except MinervaWatchError as exc:
        logger.error("Test webhook was not sent: %s", exc, extra={"event": "test_webhook_failed"})
        return 1

    logger.info("Test webhook sent successfully", extra={"event": "test_webhook_ok"})
    return 0


if __name__ == "__main__":
    sys.exit(main())
