"""Persistence helpers (load/save) for the todo list.

Tasks live in a flat CSV file in the working directory, one record per task:
``description,completed``. The completion field is written as ``true`` or
``false``; a record without it reads as not completed.
"""
import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from models import Task

TASKS_FILE = Path('tasks.csv')

# descriptions have no length cap; lift csv's 128 KiB per-field default
FIELD_SIZE_LIMIT = 2**31 - 1
csv.field_size_limit(FIELD_SIZE_LIMIT)

logger = logging.getLogger(__name__)


class TodoError(Exception):
    """Base class for todo persistence errors."""


class LoadError(TodoError):
    """Tasks file could not be read or holds a malformed record."""


class SaveError(TodoError):
    """Tasks file could not be written."""


class Storage:
    def __init__(self, path: Union[str, Path] = TASKS_FILE):
        self.path: Path = Path(path)

    def load_tasks(self) -> List[Task]:
        """Read every task from disk, in file order.

        A missing file is an error like any other I/O failure; callers abort
        startup on LoadError rather than run with an empty list.
        """
        try:
            with open(self.path, 'r', newline='', encoding='utf-8') as f:
                tasks = self._parse(csv.reader(f, strict=True))
        except UnicodeDecodeError as exc:
            raise LoadError(f'{self.path}: not valid UTF-8: {exc}') from exc
        except OSError as exc:
            raise LoadError(f'cannot read {self.path}: {exc.strerror or exc}') from exc
        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def _parse(self, reader) -> List[Task]:
        tasks: List[Task] = []
        try:
            for record in reader:
                if not record:
                    continue  # blank line
                if len(record) > 2:
                    raise LoadError(
                        f'{self.path}:{reader.line_num}: expected at most 2 fields, got {len(record)}'
                    )
                completed = len(record) > 1 and record[1] == 'true'
                tasks.append(Task(description=record[0], completed=completed))
        except csv.Error as exc:
            raise LoadError(f'{self.path}:{reader.line_num}: {exc}') from exc
        return tasks

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        """Truncate the file and write every task back (full rewrite, no rename)."""
        rows = [(t.description, 'true' if t.completed else 'false') for t in tasks]
        try:
            with open(self.path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f, lineterminator='\n')
                writer.writerows(rows)
        except OSError as exc:
            raise SaveError(f'cannot write {self.path}: {exc.strerror or exc}') from exc
        logger.debug("Saved %d tasks to %s", len(rows), self.path)
