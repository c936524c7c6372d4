class MinervaWatchError(Exception):
    """Base class for every failure the pipeline knows how to classify."""


class FetchError(MinervaWatchError):
    """The status page could not be retrieved."""


class TransportSetupError(MinervaWatchError):
    """The proxied browser transport could not be constructed. Never retried."""


class IncompleteDataError(MinervaWatchError):
    """The page was fetched but the extracted record is unusable."""


class ConfigError(MinervaWatchError):
    """A required setting is missing. Never retried."""


class NotifyError(MinervaWatchError):
    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RetryExhaustedError(MinervaWatchError):
    def __init__(self, stage: str, attempts: int, last_error: BaseException) -> None:
        super().__init__(f"All {attempts} {stage} attempts failed: {last_error}")
        self.stage = stage
        self.attempts = attempts
        self.last_error = last_error
