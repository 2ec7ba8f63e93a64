"""Field-edit mode mixin for the issue detail view."""

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from core import (
    DEFAULT_CATALOG,
    CatalogRows,
    Direction,
    EditMode,
    FieldEditState,
    FieldId,
    Intent,
    IssueSnapshot,
    describe_intent,
)

if TYPE_CHECKING:
    from application.ports import FieldEditHost

logger = logging.getLogger("issue_fields.edit")


class FieldEditingMixin:
    """Mixin exposing field-edit operations to a host view.

    The host owns ``field_edit`` (one per detail screen), keeps
    ``current_issue`` up to date and provides ``field_host`` for everything
    that leaves the core: opening pickers, saving values, messages, redraws.
    """

    field_edit: FieldEditState
    current_issue: Optional[IssueSnapshot]
    field_host: "FieldEditHost"

    @property
    def field_edit_mode(self) -> EditMode:
        return self.field_edit.mode

    def enter_field_edit_mode(self) -> None:
        self.field_edit.enter()

    def exit_field_edit_mode(self) -> EditMode:
        """Leave field-edit mode; an open inline editor is closed first and the mode stays on."""
        return self.field_edit.close()

    def handle_navigation(self, direction: Direction) -> bool:
        return self.field_edit.move(direction)

    def activate_focused_field(self) -> Optional[Intent]:
        return self.field_edit.activate(self.current_issue)

    def commit_active_editor(self) -> Optional[Tuple[FieldId, str]]:
        return self.field_edit.commit_editor()

    def cancel_active_editor(self) -> None:
        self.field_edit.close_editor()

    def close_field_editor(self) -> EditMode:
        """Escape: close the inline editor first, leave field-edit mode on the next press."""
        return self.field_edit.close()

    def open_focused_field(self) -> Optional[Intent]:
        """Activate the focused field and hand the resulting intent to the host."""
        intent = self.activate_focused_field()
        if intent is None:
            return None
        logger.debug("requesting %s", describe_intent(intent))
        self.field_host.fulfill_intent(intent)
        return intent

    def submit_active_editor(self) -> Optional[Tuple[FieldId, str]]:
        """Commit the inline editor and ask the host to save a changed value."""
        editor = self.field_edit.active_editor
        if editor is None:
            return None
        changed = editor.has_changes()
        committed = self.commit_active_editor()
        if committed is None:
            return None
        field_id, value = committed
        if changed:
            self.field_host.submit_field_update(field_id, value)
        else:
            logger.debug("%s unchanged, nothing to save", field_id.value)
        return committed

    def refresh_issue(self, snapshot: Optional[IssueSnapshot]) -> None:
        self.current_issue = snapshot


class FieldEditController(FieldEditingMixin):
    """Stand-alone holder of field-edit state for hosts that do not mix in."""

    def __init__(
        self,
        host: "FieldEditHost",
        issue: Optional[IssueSnapshot] = None,
        catalog: CatalogRows = DEFAULT_CATALOG,
    ):
        self.field_host = host
        self.current_issue = issue
        self.field_edit = FieldEditState(catalog)


__all__ = ["FieldEditingMixin", "FieldEditController"]
