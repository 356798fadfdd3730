"""Single-line text input widget used by the add and delete screens.

The session forwards raw key names here while a text-entry screen is active
and reads the current value back on ENTER. Editing itself is delegated to a
prompt_toolkit Buffer, so cursor movement and deletion behave like any other
prompt_toolkit line editor.
"""
from typing import Optional

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document

from theme import color, DIM, REVERSE

PROMPT = '> '


class TextInput:
    def __init__(self, placeholder: str = ''):
        self.placeholder: str = placeholder
        self.focused: bool = False
        self._buffer = Buffer(multiline=False)

    @property
    def value(self) -> str:
        return self._buffer.text

    @property
    def cursor_position(self) -> int:
        return self._buffer.cursor_position

    def set_value(self, text: str) -> None:
        self._buffer.set_document(Document(text, len(text)), bypass_readonly=True)

    def reset(self) -> None:
        """Clear the text; the placeholder is kept."""
        self._buffer.reset()

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def handle_key(self, key: str) -> None:
        """Apply one key to the buffer. Unknown keys and blurred state are no-ops."""
        if not self.focused:
            return
        buf = self._buffer
        if key == 'backspace':
            buf.delete_before_cursor(1)
        elif key == 'delete':
            buf.delete(1)
        elif key == 'left':
            buf.cursor_left()
        elif key == 'right':
            buf.cursor_right()
        elif key == 'home':
            buf.cursor_position = 0
        elif key == 'end':
            buf.cursor_position = len(buf.text)
        elif len(key) == 1 and key.isprintable():
            buf.insert_text(key)

    def render(self, prompt: Optional[str] = None) -> str:
        prompt = PROMPT if prompt is None else prompt
        text = self.value
        if not text:
            if not self.placeholder:
                return prompt + (color(' ', REVERSE) if self.focused else '')
            if not self.focused:
                return prompt + color(self.placeholder, DIM)
            # cursor sits on the first placeholder character
            head, rest = self.placeholder[0], self.placeholder[1:]
            return prompt + color(head, REVERSE) + color(rest, DIM)
        if not self.focused:
            return prompt + text
        pos = self.cursor_position
        under = text[pos] if pos < len(text) else ' '
        return prompt + text[:pos] + color(under, REVERSE) + text[pos + 1:]
