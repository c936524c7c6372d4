import json
from typing import TextIO

from .models import StatusRecord


def report_record(record: StatusRecord, stream: TextIO | None = None) -> None:
    print(json.dumps(record.to_dict(), indent=4, ensure_ascii=False), file=stream)
