import logging
import time
from typing import Callable

from .errors import ConfigError, RetryExhaustedError, TransportSetupError
from .logging_utils import configure_logging, logger
from .models import RunResult, RunState, StatusRecord
from .notifier import get_webhook_url, notify_with_retry, post_to_webhook
from .reporter import report_record
from .scraper import fetch_page, scrape_with_retry


def run_pipeline(
    *,
    enable_notify: bool = True,
    fetch: Callable[[], str] = fetch_page,
    post: Callable[[StatusRecord, str], None] = post_to_webhook,
    sleep: Callable[[float], None] = time.sleep,
) -> RunResult:
    try:
        record = scrape_with_retry(fetch, sleep=sleep)
    except TransportSetupError as exc:
        logger.error(str(exc), extra={"event": "transport_setup_failed"})
        return RunResult(RunState.SCRAPE_FAILED)
    except RetryExhaustedError:
        logger.error("Failed to scrape Minerva status", extra={"event": "scrape_fatal"}, exc_info=True)
        return RunResult(RunState.SCRAPE_FAILED)
    except Exception:
        logger.error("Unexpected error while scraping Minerva status", extra={"event": "scrape_fatal"}, exc_info=True)
        return RunResult(RunState.SCRAPE_FAILED)

    if enable_notify:
        try:
            webhook_url = get_webhook_url()
            notify_with_retry(record, webhook_url, post=post, sleep=sleep)
        except ConfigError as exc:
            logger.error(str(exc), extra={"event": "config_missing"})
            return RunResult(RunState.NOTIFY_FAILED)
        except RetryExhaustedError:
            logger.error("Failed to post Minerva status to webhook", extra={"event": "notify_fatal"}, exc_info=True)
            return RunResult(RunState.NOTIFY_FAILED)
        except Exception:
            logger.error(
                "Unexpected error while posting Minerva status", extra={"event": "notify_fatal"}, exc_info=True
            )
            return RunResult(RunState.NOTIFY_FAILED)
    else:
        logger.info("Webhook notification disabled for this run", extra={"event": "notify_disabled"})

    report_record(record)
    return RunResult(RunState.DONE, record)


def main(*, enable_notify: bool = True, verbose: bool = False) -> int:
    configure_logging(logging.DEBUG if verbose else logging.INFO)
    return run_pipeline(enable_notify=enable_notify).exit_code
