"""Translate the focused field into a request for the host view."""

from dataclasses import dataclass
from typing import Optional, Union

from .field_catalog import EditKind, FieldId, FieldSpec
from .issue_snapshot import IssueSnapshot


@dataclass(frozen=True)
class OpenInlineEditor:
    field_id: FieldId
    current_value: str
    multiline: bool = False


@dataclass(frozen=True)
class OpenModalPicker:
    field_id: FieldId


@dataclass(frozen=True)
class OpenPanel:
    field_id: FieldId


Intent = Union[OpenInlineEditor, OpenModalPicker, OpenPanel]


def intent_for(spec: FieldSpec, snapshot: Optional[IssueSnapshot]) -> Optional[Intent]:
    """Intent for activating ``spec``; None for read-only fields."""
    if not spec.editable:
        return None
    kind = spec.edit_kind
    if kind == EditKind.INLINE_SINGLE_LINE:
        return OpenInlineEditor(spec.id, _current_value(spec.id, snapshot))
    if kind == EditKind.INLINE_MULTI_LINE:
        return OpenInlineEditor(spec.id, _current_value(spec.id, snapshot), multiline=True)
    if kind == EditKind.MODAL_CHOICE:
        return OpenModalPicker(spec.id)
    if kind == EditKind.SIDE_PANEL:
        return OpenPanel(spec.id)
    raise ValueError(f"Unhandled edit kind: {kind!r}")


def describe_intent(intent: Optional[Intent]) -> str:
    if intent is None:
        return "none"
    if isinstance(intent, OpenInlineEditor):
        style = "multi-line" if intent.multiline else "single-line"
        return f"inline {style} editor for {intent.field_id.value}"
    if isinstance(intent, OpenModalPicker):
        return f"picker for {intent.field_id.value}"
    return f"panel for {intent.field_id.value}"


def _current_value(field_id: FieldId, snapshot: Optional[IssueSnapshot]) -> str:
    if snapshot is None:
        return ""
    return snapshot.value_for(field_id)


__all__ = [
    "OpenInlineEditor",
    "OpenModalPicker",
    "OpenPanel",
    "Intent",
    "intent_for",
    "describe_intent",
]
