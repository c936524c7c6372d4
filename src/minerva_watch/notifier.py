import os
import time
from typing import Any, Callable

import requests

from .config import (
    EMBED_COLOR,
    EMBED_MAX_DESCRIPTION,
    EMBED_MAX_FIELD_VALUE,
    EMBED_MAX_FIELDS,
    EMBED_TITLE,
    NOTIFY_RETRIES,
    NOTIFY_RETRY_DELAY_SECONDS,
    NOTIFY_TIMEOUT_SECONDS,
    WEBHOOK_URL_ENV,
)
from .errors import ConfigError, NotifyError
from .logging_utils import logger
from .models import SaleEntry, StatusRecord
from .retry import call_with_retry
from .utils import truncate_text


def get_webhook_url() -> str:
    url = (os.getenv(WEBHOOK_URL_ENV) or "").strip()
    if not url:
        raise ConfigError(f"{WEBHOOK_URL_ENV} is not set in the environment")
    return url


def _sale_field(entry: SaleEntry) -> dict[str, Any]:
    name = f"Sale {entry.sale_number}"
    if entry.is_next:
        name += " (next)"
    value = f"{entry.sale_number} at {entry.location}: {entry.start_date} to {entry.end_date}"
    return {"name": name, "value": truncate_text(value, EMBED_MAX_FIELD_VALUE), "inline": False}


def build_webhook_payload(record: StatusRecord) -> dict[str, Any]:
    status = record.current_status
    fields: list[dict[str, Any]] = [
        {
            "name": "Upcoming Sale Schedule",
            "value": "Below is the schedule of upcoming sales.",
            "inline": False,
        }
    ]
    room = EMBED_MAX_FIELDS - len(fields)
    entries = record.sale_schedule[:room]
    if len(record.sale_schedule) > room:
        logger.warning(
            "Sale schedule exceeds embed field limit; dropping extra entries",
            extra={"event": "embed_truncated", "count": len(record.sale_schedule) - room},
        )
    fields.extend(_sale_field(entry) for entry in entries)

    embed = {
        "title": EMBED_TITLE,
        "description": truncate_text(
            f"**Location:** {status.next_location}\n**Arrival Time:** {status.arrival_time}\n",
            EMBED_MAX_DESCRIPTION,
        ),
        "color": EMBED_COLOR,
        "fields": fields,
    }
    return {"embeds": [embed]}


def post_to_webhook(record: StatusRecord, webhook_url: str | None = None) -> None:
    url = webhook_url or get_webhook_url()
    payload = build_webhook_payload(record)

    try:
        response = requests.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=NOTIFY_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        raise NotifyError(f"Failed to send webhook request: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise NotifyError(
            f"Webhook rejected message, status code: {response.status_code}, response: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    logger.info(
        "Webhook notification sent",
        extra={"event": "notify_sent", "status_code": response.status_code, "count": len(record.sale_schedule)},
    )


def notify_with_retry(
    record: StatusRecord,
    webhook_url: str,
    *,
    post: Callable[[StatusRecord, str], None] = post_to_webhook,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    call_with_retry(
        lambda: post(record, webhook_url),
        stage="notify",
        attempts=NOTIFY_RETRIES,
        delay_seconds=NOTIFY_RETRY_DELAY_SECONDS,
        retry_on=(NotifyError,),
        sleep=sleep,
    )
