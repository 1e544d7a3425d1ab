"""JSON file storage for the last seen list of shows."""
import json
import logging
from pathlib import Path
from typing import List, Sequence, Union

from processor.exceptions import PersistenceError
from processor.models import Show

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Loads and saves the show snapshot kept between runs."""

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: Location of the snapshot JSON file
        """
        self.path = Path(path)

    def load(self) -> List[Show]:
        """
        Load the previous snapshot.

        A missing or unreadable snapshot is treated as empty, so the first
        run reports every show as new.

        Returns:
            Shows from the last successful run, or an empty list
        """
        if not self.path.exists():
            logger.info(f"No snapshot at {self.path}, starting empty")
            return []

        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            shows = [Show.from_dict(item) for item in data]
        except Exception:
            logger.exception(f"Failed to load snapshot from {self.path}, starting empty")
            return []

        logger.info(f"Loaded {len(shows)} shows from snapshot {self.path}")
        return shows

    def save(self, shows: Sequence[Show]) -> None:
        """
        Overwrite the snapshot with the given shows.

        Raises:
            PersistenceError: If the shows cannot be serialized or written
        """
        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        try:
            text = json.dumps(
                [show.to_dict() for show in shows],
                ensure_ascii=False,
                indent=2
            )
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding='utf-8')
            tmp_path.replace(self.path)
        except (OSError, TypeError, ValueError, AttributeError) as e:
            tmp_path.unlink(missing_ok=True)
            raise PersistenceError(self.path, f"Failed to save snapshot: {e}") from e

        logger.info(f"Saved {len(shows)} shows to snapshot {self.path}")
