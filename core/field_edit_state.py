"""Browsing / Navigating / Editing state machine for field-edit mode."""

import logging
from enum import Enum
from typing import Optional, Tuple

from .editor_dispatch import Intent, OpenInlineEditor, intent_for
from .field_catalog import DEFAULT_CATALOG, CatalogRows, FieldId, FieldSpec
from .field_grid import Direction, FieldGrid, GridPosition
from .inline_editor import ActiveEditor
from .issue_snapshot import IssueSnapshot

logger = logging.getLogger("issue_fields.edit")


class EditMode(Enum):
    BROWSING = "browsing"
    NAVIGATING = "navigating"
    EDITING = "editing"


class FieldEditState:
    """Grid cursor plus the inline editor that may be open on it.

    One instance lives with each detail screen. The grid exists only while
    field-edit mode is on; the editor only while an inline field is being
    edited. Modal and panel fields are handed to the host, and the field
    waiting on the host is remembered in ``pending_field``.
    """

    def __init__(self, catalog: CatalogRows = DEFAULT_CATALOG):
        self.catalog = catalog
        self.grid: Optional[FieldGrid] = None
        self.active_editor: Optional[ActiveEditor] = None
        self.pending_field: Optional[FieldId] = None

    @property
    def mode(self) -> EditMode:
        if self.grid is None:
            return EditMode.BROWSING
        if self.active_editor is not None:
            return EditMode.EDITING
        return EditMode.NAVIGATING

    def focused_field(self) -> Optional[FieldSpec]:
        if self.grid is None:
            return None
        return self.grid.current_field()

    def position(self) -> Optional[GridPosition]:
        if self.grid is None:
            return None
        return self.grid.position()

    def enter(self) -> None:
        self.grid = FieldGrid(self.catalog)
        self.active_editor = None
        self.pending_field = None
        logger.debug("field-edit mode entered at %s", self.grid.position())

    def exit(self) -> None:
        """Drop grid, editor and pending intent at once; Escape should go through close()."""
        self.grid = None
        self.active_editor = None
        self.pending_field = None
        logger.debug("field-edit mode left")

    def close(self) -> EditMode:
        """Step back once: close the editor if open, otherwise leave the mode."""
        if self.active_editor is not None:
            self.close_editor()
        elif self.grid is not None:
            self.exit()
        return self.mode

    def move(self, direction: Direction) -> bool:
        if self.mode != EditMode.NAVIGATING:
            return False
        return self.grid.move(direction)

    def activate(self, snapshot: Optional[IssueSnapshot]) -> Optional[Intent]:
        if self.mode != EditMode.NAVIGATING:
            return None
        spec = self.grid.current_field()
        if spec is None:
            return None
        intent = intent_for(spec, snapshot)
        if intent is None:
            return None
        if isinstance(intent, OpenInlineEditor):
            self.active_editor = ActiveEditor(spec.id, spec.edit_kind, intent.current_value)
            self.pending_field = None
        else:
            self.pending_field = spec.id
        logger.debug("activated %s -> %s", spec.id.value, type(intent).__name__)
        return intent

    def close_editor(self) -> bool:
        if self.active_editor is None:
            return False
        logger.debug("discarded editor for %s", self.active_editor.field_id.value)
        self.active_editor = None
        return True

    def commit_editor(self) -> Optional[Tuple[FieldId, str]]:
        editor = self.active_editor
        if editor is None:
            return None
        self.active_editor = None
        return editor.field_id, editor.value

    def consume_pending(self, field_id: FieldId) -> bool:
        """Clear the pending host intent if it belongs to ``field_id``."""
        if self.grid is None or self.pending_field != field_id:
            return False
        self.pending_field = None
        return True


__all__ = ["EditMode", "FieldEditState"]
