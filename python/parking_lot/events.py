import logging
from pathlib import Path

from parking_lot import config
from parking_lot.records import LotEvent

logger = logging.getLogger(__name__)


class EventLog:
    """
    Append-only log file for lot events: one `[timestamp] description` line each.

    If the file cannot be opened the sink keeps working as a no-op, the lot
    itself never depends on it.
    """
    def __init__(self, path: str | Path = config.LOG_FILE) -> None:
        self.path = Path(path)
        # unregistered, so handlers never leak between instances
        self.sink = logging.Logger(f"{__name__}.sink")
        self.sink.setLevel(logging.INFO)
        self.sink.propagate = False

        try:
            self.handler: logging.Handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.error(f"Failed to open log file {self.path}: {exc}")
            self.handler = logging.NullHandler()

        self.handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", config.LOG_TIME_FORMAT))
        self.sink.addHandler(self.handler)

    @property
    def enabled(self) -> bool:
        return not isinstance(self.handler, logging.NullHandler)

    def observe(self, event: LotEvent) -> None:
        self.sink.info(event.describe())

    def close(self) -> None:
        self.sink.removeHandler(self.handler)
        self.handler.close()

    def __enter__(self) -> "EventLog":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
