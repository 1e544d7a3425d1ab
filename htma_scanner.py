"""Entry point for the HTMA new show scanner."""
import json
import logging
import os
import sys
import time
from dataclasses import dataclass, field
from typing import List

from notifier.telegram_notifier import TelegramNotifier, format_new_shows_message
from processor.aggregator import ShowAggregator
from processor.models import Show
from processor.show_diff import find_new_shows
from scraper.htma_shows import HtmaShowsScraper
from scraper.registry import default_registry
from storage.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment."""
    log_level: str = 'INFO'
    timeout_seconds: int = 30
    snapshot_path: str = 'shows.json'


def load_settings() -> Settings:
    """Read settings from environment variables, falling back to defaults."""
    timeout_raw = os.environ.get('TIMEOUT_SECONDS', '30')
    try:
        timeout_seconds = int(timeout_raw)
        if timeout_seconds <= 0:
            raise ValueError(timeout_raw)
    except ValueError:
        logger.warning(f"Invalid TIMEOUT_SECONDS={timeout_raw!r}, using default=30")
        timeout_seconds = 30

    return Settings(
        log_level=os.environ.get('LOG_LEVEL', 'INFO'),
        timeout_seconds=timeout_seconds,
        snapshot_path=os.environ.get('SNAPSHOT_PATH', 'shows.json'),
    )


@dataclass
class RunResult:
    """Summary of a scanner run."""
    total_shows: int
    new_shows: List[Show] = field(default_factory=list)
    notified: bool = False


def run(settings: Settings) -> RunResult:
    """
    Scan all categories, notify about new shows and save the snapshot.

    The snapshot is only written after every other step succeeded.

    Args:
        settings: Runtime settings

    Returns:
        RunResult describing what was found

    Raises:
        HtmaScannerError: If any step other than loading the snapshot fails
    """
    notifier = TelegramNotifier.from_env(timeout=settings.timeout_seconds)
    registry = default_registry()
    scraper = HtmaShowsScraper(registry, timeout=settings.timeout_seconds)
    aggregator = ShowAggregator(scraper, registry.categories)
    store = SnapshotStore(settings.snapshot_path)

    previous_shows = store.load()
    current_shows = aggregator.aggregate()
    new_shows = find_new_shows(previous_shows, current_shows)

    if not new_shows:
        logger.info("No new shows")
        store.save(current_shows)
        return RunResult(total_shows=len(current_shows))

    logger.info(f"Sending notification for {len(new_shows)} new shows")
    notifier.send(format_new_shows_message(new_shows))
    store.save(current_shows)

    return RunResult(
        total_shows=len(current_shows),
        new_shows=new_shows,
        notified=True
    )


def main() -> int:
    """Run the scanner once and return the process exit code."""
    setup_logging(os.environ.get('LOG_LEVEL', 'INFO'))
    settings = load_settings()

    print("htma-scanner")
    start_time = time.time()
    try:
        result = run(settings)
    except Exception as e:
        logger.error(
            f"Scanner run failed: {e}",
            extra={'error_type': type(e).__name__},
            exc_info=True
        )
        return 1

    if result.new_shows:
        print(f"{len(result.new_shows)} new shows:")
        for show in result.new_shows:
            print(show)
    else:
        print("No new shows")

    logger.info(
        f"Scanner run completed in {round(time.time() - start_time, 2)} seconds"
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
