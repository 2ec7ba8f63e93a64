"""Inline text editor state owned by the field-edit core."""

from typing import Optional

from prompt_toolkit.buffer import Buffer

from .field_catalog import EditKind, FieldId


class ActiveEditor:
    """Edit buffer for one inline field.

    ``kind`` tags the editor as single- or multi-line; ``original_value`` is
    kept so callers can tell whether anything changed and so cancelling never
    needs the host to resend the value.
    """

    def __init__(self, field_id: FieldId, kind: EditKind, original_value: str = "", buffer: Optional[Buffer] = None):
        if not kind.is_inline:
            raise ValueError(f"{kind.name} fields are edited by the host, not inline")
        self.field_id = field_id
        self.kind = kind
        self.original_value = original_value or ""
        self.buffer = buffer if buffer is not None else Buffer(multiline=self.multiline)
        self.buffer.text = self.original_value
        self.buffer.cursor_position = len(self.original_value)

    @property
    def multiline(self) -> bool:
        return self.kind == EditKind.INLINE_MULTI_LINE

    @property
    def value(self) -> str:
        return self.buffer.text

    def has_changes(self) -> bool:
        return self.value != self.original_value

    @property
    def cursor_line(self) -> int:
        return self.buffer.document.cursor_position_row

    @property
    def cursor_col(self) -> int:
        return self.buffer.document.cursor_position_col

    @property
    def line_count(self) -> int:
        return self.buffer.document.line_count

    # Text input

    def insert_text(self, text: str) -> None:
        if not self.multiline:
            text = _single_line(text)
        if text:
            self.buffer.insert_text(text)

    def insert_newline(self) -> bool:
        if not self.multiline:
            return False
        self.buffer.insert_text("\n")
        return True

    def backspace(self) -> bool:
        """Delete before the cursor, joining with the previous line at column 0."""
        return bool(self.buffer.delete_before_cursor(1))

    def delete(self) -> bool:
        return bool(self.buffer.delete(1))

    def kill_to_line_start(self) -> bool:
        offset = -self.buffer.document.get_start_of_line_position()
        if offset <= 0:
            return False
        self.buffer.delete_before_cursor(offset)
        return True

    def kill_to_line_end(self) -> bool:
        document = self.buffer.document
        offset = document.get_end_of_line_position()
        if offset > 0:
            self.buffer.delete(offset)
            return True
        if not document.on_last_line:
            self.buffer.delete(1)
            return True
        return False

    # Cursor movement

    def cursor_left(self) -> None:
        if self.buffer.cursor_position > 0:
            self.buffer.cursor_position -= 1

    def cursor_right(self) -> None:
        if self.buffer.cursor_position < len(self.buffer.text):
            self.buffer.cursor_position += 1

    def cursor_up(self) -> None:
        self.buffer.cursor_up()

    def cursor_down(self) -> None:
        self.buffer.cursor_down()

    def home(self) -> None:
        self.buffer.cursor_position += self.buffer.document.get_start_of_line_position()

    def end(self) -> None:
        self.buffer.cursor_position += self.buffer.document.get_end_of_line_position()

    def __repr__(self) -> str:
        return f"ActiveEditor({self.field_id.name}, {self.kind.name}, changed={self.has_changes()})"


def _single_line(text: str) -> str:
    return (text or "").replace("\r", "").replace("\n", " ")


__all__ = ["ActiveEditor"]
