from dataclasses import asdict, dataclass, field
from enum import Enum


@dataclass
class CurrentStatus:
    next_location: str = ""
    arrival_time: str = ""


@dataclass
class SaleEntry:
    sale_number: str
    location: str
    start_date: str
    end_date: str
    is_next: bool = False


@dataclass
class StatusRecord:
    current_status: CurrentStatus = field(default_factory=CurrentStatus)
    sale_schedule: list[SaleEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


class RunState(Enum):
    DONE = "done"
    SCRAPE_FAILED = "scrape_failed"
    NOTIFY_FAILED = "notify_failed"


@dataclass(frozen=True)
class RunResult:
    state: RunState
    record: StatusRecord | None = None

    @property
    def ok(self) -> bool:
        return self.state is RunState.DONE

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
