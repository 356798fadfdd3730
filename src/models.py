"""Data models for the terminal todo application.

Exposes the Task dataclass and the Mode enum driving the interactive screens.
A task has no id: its position in the list is its identity, and the same
position is used for display numbering and for the order on disk.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    """Interaction context; decides which keys mean something."""
    IDLE = "idle"
    ADD = "add"
    LIST = "list"
    DELETE = "delete"


@dataclass
class Task:
    """A single todo item.

    Fields:
        description: Short, single-line text entered by the user.
        completed: Completion flag, toggled from the list screen.
    """
    description: str
    completed: bool = False

    def toggle(self) -> None:
        self.completed = not self.completed
