from typing import Any

from bs4 import BeautifulSoup

from .logging_utils import logger
from .models import CurrentStatus, SaleEntry, StatusRecord
from .selectors import get_selector_config
from .utils import normalize_whitespace

NEXT_MARKER = "Next"


def strip_next_marker(text: str) -> str:
    """Cut an inline "Next ..." annotation off a location cell.

    The source page renders the countdown to the next sale inside the same
    cell as the location name, e.g. "Vault 76 Next: 14:32".
    """
    return text.split(NEXT_MARKER, 1)[0].strip()


def _cell_text(row: Any, position: int) -> str:
    cell = row.select_one(f":scope > td:nth-child({position})")
    if cell is None:
        return ""
    return normalize_whitespace(cell.get_text())


def extract_current_status(soup: Any, record: StatusRecord, selector_cfg: dict[str, str]) -> None:
    for container in soup.select(selector_cfg["status_container"]):
        location_els = container.select(selector_cfg["next_location"])
        if not location_els:
            continue
        countdown_el = container.select_one(selector_cfg["countdown"])
        arrival_time = ""
        if countdown_el is not None:
            arrival_time = countdown_el.get(selector_cfg["countdown_attr"]) or ""
        record.current_status = CurrentStatus(
            next_location=normalize_whitespace("".join(el.get_text() for el in location_els)),
            arrival_time=arrival_time,
        )
        return


def parse_sale_entry(row: Any, selector_cfg: dict[str, str]) -> SaleEntry | None:
    sale_number = _cell_text(row, 1)
    location = strip_next_marker(_cell_text(row, 2))
    start_date = _cell_text(row, 3)
    end_date = _cell_text(row, 4)

    if not (sale_number and location and start_date and end_date):
        return None

    return SaleEntry(
        sale_number=sale_number,
        location=location,
        start_date=start_date,
        end_date=end_date,
        is_next=selector_cfg["active_row_class"] in (row.get("class") or []),
    )


def extract_sale_schedule(soup: Any, record: StatusRecord, selector_cfg: dict[str, str]) -> None:
    for index, row in enumerate(soup.select(selector_cfg["schedule_rows"]), start=1):
        try:
            entry = parse_sale_entry(row, selector_cfg)
        except Exception:
            logger.warning(
                "Failed to parse schedule row; skipping it",
                extra={"event": "row_failed", "count": index},
                exc_info=True,
            )
            continue
        if entry is None:
            logger.debug("Dropping incomplete schedule row", extra={"event": "row_dropped", "count": index})
            continue
        record.sale_schedule.append(entry)


def extract_status_record(html: str) -> StatusRecord:
    selector_cfg = get_selector_config()
    soup = BeautifulSoup(html, "html.parser")
    record = StatusRecord()

    for rule in (extract_current_status, extract_sale_schedule):
        try:
            rule(soup, record, selector_cfg)
        except Exception:
            logger.warning(
                "Extraction rule failed; continuing with the remaining rules",
                extra={"event": "extract_rule_failed"},
                exc_info=True,
            )

    logger.info(
        "Extracted Minerva status",
        extra={"event": "extract_complete", "count": len(record.sale_schedule)},
    )
    return record
