"""Event-loop driver for the todo screens.

prompt_toolkit owns the terminal: it reads keys, switches to the alternate
screen buffer (when enabled) and restores the terminal on exit. Every key
press is translated to a session key name, handed to the Session, and the
frame is redrawn from view.render().
"""
import logging
import os
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output

from session import Session
from view import render

logger = logging.getLogger(__name__)

# prompt_toolkit key -> session key name
NAMED_KEYS = {
    'enter': 'enter',
    'escape': 'escape',
    'up': 'up',
    'down': 'down',
    'left': 'left',
    'right': 'right',
    'home': 'home',
    'end': 'end',
    'backspace': 'backspace',
    'delete': 'delete',
    'c-c': 'ctrl+c',
}


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def alt_screen_default() -> bool:
    # Alt screen default ON; disable with TODO_ALT_SCREEN=0 (or false/no/off)
    return _truthy_env(os.getenv("TODO_ALT_SCREEN"), True)


def key_name(event: KeyPressEvent) -> Optional[str]:
    """Session key name for a catch-all key press; None for unprintable input."""
    data = event.data
    if len(data) == 1 and data.isprintable():
        return data
    return None


class CLI:
    def __init__(self, session: Session, alt_screen: Optional[bool] = None):
        self.session: Session = session
        self.alt_screen: bool = alt_screen_default() if alt_screen is None else alt_screen

    def _dispatch(self, event: KeyPressEvent, name: str) -> None:
        if not self.session.handle_key(name):
            event.app.exit()

    def key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        for pt_key, name in NAMED_KEYS.items():
            # escape is eager so it fires without waiting for a meta sequence
            @kb.add(pt_key, eager=(pt_key == 'escape'))
            def _(event: KeyPressEvent, name: str = name) -> None:
                self._dispatch(event, name)

        @kb.add(Keys.Any)
        def _(event: KeyPressEvent) -> None:
            name = key_name(event)
            if name is not None:
                self._dispatch(event, name)

        return kb

    def build_application(self, input: Optional[Input] = None, output: Optional[Output] = None) -> Application:
        control = FormattedTextControl(text=lambda: ANSI(render(self.session)))
        return Application(
            layout=Layout(Window(content=control, wrap_lines=True)),
            key_bindings=self.key_bindings(),
            full_screen=self.alt_screen,
            input=input,
            output=output,
        )

    def run(self) -> None:
        """Block until the user quits from the idle screen."""
        logger.info("Starting UI (alt_screen=%s, %s)", self.alt_screen, self.session)
        self.build_application().run()
        logger.info("UI closed (%s)", self.session)
