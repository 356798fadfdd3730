"""Interaction state machine: mode, cursor, pending input and the task list.

One Session lives for the whole process. The driver feeds it one key name at
a time through handle_key(); every action that changes the task list saves
synchronously before the next key is read.

Key names: "enter", "escape", "up", "down", "left", "right", "home", "end",
"backspace", "delete", "ctrl+c", or a single printable character.
"""
import logging
import re
from typing import List, Optional, Protocol

from models import Mode, Task
from storage import SaveError
from textinput import TextInput

ADD_PLACEHOLDER = "Enter a new task"
DELETE_PLACEHOLDER = "Enter the task number"
INVALID_NUMBER_PLACEHOLDER = "Invalid task number! Try again."

QUIT_KEYS = ('q', 'ctrl+c')
INTEGER_RE = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


class TaskSaver(Protocol):
    def save_tasks(self, tasks: List[Task]) -> None: ...


class Session:
    def __init__(self, tasks: List[Task], storage: TaskSaver, text_input: Optional[TextInput] = None):
        self.tasks: List[Task] = list(tasks)
        self.storage = storage
        self.input: TextInput = text_input if text_input is not None else TextInput()
        self.input.focus()
        self.mode: Mode = Mode.IDLE
        self.cursor: int = 0

    # -------------------- queries --------------------
    def completed_count(self) -> int:
        return sum(1 for t in self.tasks if t.completed)

    @property
    def pending_input(self) -> str:
        return self.input.value

    # -------------------- dispatch --------------------
    def handle_key(self, key: str) -> bool:
        """Process one key. Returns False when the user asked to quit."""
        if self.mode is Mode.IDLE:
            return self._handle_idle(key)
        if self.mode is Mode.ADD:
            self._handle_add(key)
        elif self.mode is Mode.LIST:
            self._handle_list(key)
        elif self.mode is Mode.DELETE:
            self._handle_delete(key)
        return True

    def _handle_idle(self, key: str) -> bool:
        if key in QUIT_KEYS:
            logger.info("Quit requested (%s)", self)
            return False
        if key == '+':
            self._enter_text_mode(Mode.ADD, ADD_PLACEHOLDER)
        elif key == 'l':
            self._clamp_cursor()
            self.mode = Mode.LIST
        elif key == 'd':
            self._enter_text_mode(Mode.DELETE, DELETE_PLACEHOLDER)
        return True

    def _enter_text_mode(self, mode: Mode, placeholder: str) -> None:
        self.input.reset()
        self.input.placeholder = placeholder
        self.input.focus()
        self.mode = mode

    def _back_to_idle(self) -> None:
        self.input.reset()
        self.mode = Mode.IDLE

    # ---- add ----
    def _handle_add(self, key: str) -> None:
        if key == 'escape':
            self._back_to_idle()
        elif key == 'enter':
            description = self.input.value
            if description:
                self.tasks.append(Task(description=description))
                logger.info("Added task %d: %r", len(self.tasks), description)
                self._persist()
            self._back_to_idle()
        else:
            self.input.handle_key(key)

    # ---- list ----
    def _handle_list(self, key: str) -> None:
        if key == 'escape':
            self.mode = Mode.IDLE
            return
        if not self.tasks:
            return  # nothing to move over, toggle or clear
        if key == 'up':
            self.cursor = max(0, self.cursor - 1)
        elif key == 'down':
            self.cursor = min(len(self.tasks) - 1, self.cursor + 1)
        elif key == 'enter':
            task = self.tasks[self.cursor]
            task.toggle()
            logger.info("Task %d marked %s", self.cursor + 1, "done" if task.completed else "not done")
            self._persist()
        elif key == 'd':
            self.delete_completed()

    def delete_completed(self) -> int:
        """Drop every completed task, keeping survivors in order. Returns the count removed."""
        survivors = [t for t in self.tasks if not t.completed]
        removed = len(self.tasks) - len(survivors)
        self.tasks = survivors
        self._clamp_cursor()
        logger.info("Removed %d completed tasks", removed)
        self._persist()
        return removed

    # ---- delete ----
    def _handle_delete(self, key: str) -> None:
        if key == 'escape':
            self._back_to_idle()
            return
        if not self.tasks:
            return  # confirm disabled, nothing to number
        if key != 'enter':
            self.input.handle_key(key)
            return
        number = self._parse_task_number(self.input.value)
        if number is None:
            logger.debug("Rejected task number %r", self.input.value)
            self.input.set_value('')
            self.input.placeholder = INVALID_NUMBER_PLACEHOLDER
            return
        removed = self.tasks.pop(number - 1)
        self._clamp_cursor()
        logger.info("Deleted task %d: %r", number, removed.description)
        self._persist()
        self._back_to_idle()

    def _parse_task_number(self, raw: str) -> Optional[int]:
        """1-based task number within range, or None."""
        if not INTEGER_RE.fullmatch(raw):
            return None
        number = int(raw)
        if 1 <= number <= len(self.tasks):
            return number
        return None

    # -------------------- helpers --------------------
    def _clamp_cursor(self) -> None:
        if not self.tasks:
            self.cursor = 0
        else:
            self.cursor = max(0, min(self.cursor, len(self.tasks) - 1))

    def _persist(self) -> bool:
        """Save the whole list. Failures are logged; memory stays authoritative."""
        try:
            self.storage.save_tasks(self.tasks)
        except SaveError as exc:
            logger.error("Error saving tasks: %s", exc)
            return False
        return True

    def __str__(self) -> str:
        return f'{len(self.tasks)} tasks, {self.completed_count()} completed'
