"""Screen rendering: one frame of text per mode, styled through theme."""
from typing import List

from models import Mode
from session import Session
from theme import color, BOLD, CHECKED_COLOR, CURSOR_COLOR

IDLE_MENU = (
    "Enter a command:",
    "- Press '+' to add a task.",
    "- Press 'l' to view all tasks.",
    "- Press 'd' to delete a single task.",
    "- Press 'q' to quit.",
)


def render(session: Session) -> str:
    if session.mode is Mode.ADD:
        lines = _add_screen(session)
    elif session.mode is Mode.LIST:
        lines = _list_screen(session)
    elif session.mode is Mode.DELETE:
        lines = _delete_screen(session)
    else:
        lines = list(IDLE_MENU)
    return '\n'.join(lines) + '\n'


def _add_screen(session: Session) -> List[str]:
    return [
        "Add the task:",
        session.input.render(),
        "",
        "Press ENTER to save task or ESC to cancel.",
    ]


def _list_screen(session: Session) -> List[str]:
    if not session.tasks:
        return ["No tasks added.", "Press ESC to go back."]
    lines = [color("Your tasks:", BOLD)]
    for i, task in enumerate(session.tasks):
        number = f"{i + 1})"
        selected = i == session.cursor
        marker = ">" if selected else " "
        if task.completed:
            # done items keep their colour even under the cursor
            lines.append(f"{marker} {color(number, CHECKED_COLOR)} {task.description}")
        elif selected:
            lines.append(f"{marker} {color(number, CURSOR_COLOR)} {color(task.description, CURSOR_COLOR)}")
        else:
            lines.append(f"{marker} {number} {task.description}")
    lines += [
        "",
        "Press ENTER to toggle completion.",
        "Press 'd' to delete completed tasks",
        "Press ESC to go back.",
    ]
    return lines


def _delete_screen(session: Session) -> List[str]:
    if not session.tasks:
        return ["No tasks to delete.", "Press ESC to go back."]
    return [
        "Enter the task number to delete:",
        session.input.render(),
        "",
        "Press ENTER to delete the task or ESC to cancel.",
    ]
