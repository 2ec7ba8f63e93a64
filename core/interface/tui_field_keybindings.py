"""prompt_toolkit key bindings for field-edit mode."""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from prompt_toolkit.filters import Condition, Filter
from prompt_toolkit.key_binding import KeyBindings

from core import Direction, EditMode

logger = logging.getLogger("issue_fields.edit")

_NAVIGATION_ACTIONS = {
    "left": Direction.LEFT,
    "down": Direction.DOWN,
    "up": Direction.UP,
    "right": Direction.RIGHT,
}


def _bind(kb: KeyBindings, keys: Iterable[str], handler: Callable, filter: Filter, eager: bool = False) -> None:
    for key in keys:
        try:
            kb.add(key, filter=filter, eager=eager)(handler)
        except ValueError as exc:
            logger.warning("Skipping invalid key binding %r: %s", key, exc)


def build_field_edit_bindings(tui, keymap: Optional[Dict[str, List[str]]] = None) -> KeyBindings:
    """Bindings that drive ``tui`` (a FieldEditingMixin host) from keyboard input.

    Args:
        tui: Object exposing the field-edit operations and ``field_host``.
        keymap: Action -> keys; defaults to the user config key map.
    """
    if keymap is None:
        from config import get_field_keymap

        keymap = get_field_keymap()

    kb = KeyBindings()

    browsing = Condition(lambda: tui.field_edit_mode == EditMode.BROWSING)
    navigating = Condition(lambda: tui.field_edit_mode == EditMode.NAVIGATING)
    editing = Condition(lambda: tui.field_edit_mode == EditMode.EDITING)
    active = navigating | editing
    editing_multiline = editing & Condition(
        lambda: bool(tui.field_edit.active_editor and tui.field_edit.active_editor.multiline)
    )
    editing_singleline = editing & ~editing_multiline

    def _render() -> None:
        tui.field_host.force_render()

    for action, direction in _NAVIGATION_ACTIONS.items():

        def _move(event, direction=direction):
            if tui.handle_navigation(direction):
                _render()

        _bind(kb, keymap.get(action, ()), _move, navigating)

    def _enter_mode(event):
        tui.enter_field_edit_mode()
        _render()

    _bind(kb, keymap.get("enter_mode", ()), _enter_mode, browsing)

    def _activate(event):
        tui.open_focused_field()
        _render()

    _bind(kb, keymap.get("activate", ()), _activate, navigating)

    def _submit(event):
        tui.submit_active_editor()
        _render()

    _bind(kb, keymap.get("commit", ()), _submit, editing)
    _bind(kb, keymap.get("activate", ()), _submit, editing_singleline)

    def _newline(event):
        tui.field_edit.active_editor.insert_newline()
        _render()

    _bind(kb, keymap.get("activate", ()), _newline, editing_multiline)

    def _close(event):
        tui.close_field_editor()
        _render()

    _bind(kb, keymap.get("close", ()), _close, active, eager=True)

    return kb


__all__ = ["build_field_edit_bindings"]
