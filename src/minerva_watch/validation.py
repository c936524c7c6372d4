from .errors import IncompleteDataError
from .models import StatusRecord


def validate_record(record: StatusRecord) -> None:
    missing = []
    if not record.current_status.next_location:
        missing.append("next location")
    if not record.sale_schedule:
        missing.append("sale schedule")
    if missing:
        raise IncompleteDataError(f"Scraped page is missing required data: {', '.join(missing)}")
