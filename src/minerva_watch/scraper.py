import time
from contextlib import ExitStack
from typing import Callable
from urllib.parse import urlparse

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .config import (
    PROXY_SERVER,
    REQUEST_TIMEOUT_SECONDS,
    SCRAPE_RETRIES,
    SCRAPE_RETRY_DELAY_SECONDS,
    TARGET_URL,
    USER_AGENT,
)
from .errors import FetchError, IncompleteDataError, TransportSetupError
from .extractors import extract_status_record
from .logging_utils import logger
from .models import StatusRecord
from .retry import call_with_retry
from .validation import validate_record


def build_proxy_settings(proxy_server: str) -> dict[str, str]:
    parsed = urlparse(proxy_server)
    try:
        port = parsed.port
    except ValueError as exc:
        raise TransportSetupError(f"Invalid proxy port in {proxy_server!r}") from exc
    if parsed.scheme != "socks5" or not parsed.hostname or port is None:
        raise TransportSetupError(f"Proxy must look like socks5://host:port, got {proxy_server!r}")
    return {"server": f"socks5://{parsed.hostname}:{port}"}


def _log_fetch_failure(url: str, status: int | None, error: object) -> None:
    logger.warning(
        "Request failed: %s",
        error,
        extra={"event": "fetch_failed", "url": url, "status_code": status},
    )


def _close_browser(browser, url: str) -> None:
    try:
        browser.close()
    except PlaywrightError:
        logger.warning(
            "Failed to close browser",
            extra={"event": "browser_close_failed", "url": url},
            exc_info=True,
        )


def fetch_page(
    url: str = TARGET_URL,
    *,
    proxy_server: str = PROXY_SERVER,
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
    headless: bool = True,
) -> str:
    proxy = build_proxy_settings(proxy_server)

    with ExitStack() as stack:
        try:
            p = stack.enter_context(sync_playwright())
        except PlaywrightError as exc:
            raise TransportSetupError(f"Could not start Playwright: {exc}") from exc

        try:
            browser = p.chromium.launch(headless=headless, proxy=proxy)
        except PlaywrightError as exc:
            raise TransportSetupError(f"Could not launch browser through {proxy['server']}: {exc}") from exc

        try:
            # A fresh context per call keeps nothing cached between attempts.
            context = browser.new_context(user_agent=USER_AGENT)
            page = context.new_page()
            logger.info("Fetching status page", extra={"event": "navigate", "url": url})
            response = page.goto(url, wait_until="domcontentloaded", timeout=timeout_seconds * 1000)

            if response is None:
                _log_fetch_failure(url, None, "no response")
                raise FetchError(f"Failed to visit {url}: no response received")
            if not response.ok:
                _log_fetch_failure(url, response.status, response.status_text)
                raise FetchError(f"Failed to visit {url}: HTTP {response.status} {response.status_text}")

            return page.content()
        except PlaywrightError as exc:
            _log_fetch_failure(url, None, exc)
            raise FetchError(f"Failed to visit {url}: {exc}") from exc
        finally:
            _close_browser(browser, url)


def scrape_once(fetch: Callable[[], str] = fetch_page) -> StatusRecord:
    html = fetch()
    record = extract_status_record(html)
    validate_record(record)
    logger.info(
        "Scraped Minerva status",
        extra={"event": "scrape_complete", "count": len(record.sale_schedule)},
    )
    return record


def scrape_with_retry(
    fetch: Callable[[], str] = fetch_page,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> StatusRecord:
    return call_with_retry(
        lambda: scrape_once(fetch),
        stage="scrape",
        attempts=SCRAPE_RETRIES,
        delay_seconds=SCRAPE_RETRY_DELAY_SECONDS,
        retry_on=(FetchError, IncompleteDataError),
        sleep=sleep,
    )
