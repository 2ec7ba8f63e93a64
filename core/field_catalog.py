"""Static catalog of issue fields shown on the detail screen."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple


class FieldId(Enum):
    KEY = "key"
    PROJECT = "project"
    ISSUE_TYPE = "issue_type"
    SUMMARY = "summary"
    STATUS = "status"
    PRIORITY = "priority"
    ASSIGNEE = "assignee"
    REPORTER = "reporter"
    LABELS = "labels"
    COMPONENTS = "components"
    DUE_DATE = "due_date"
    STORY_POINTS = "story_points"
    CREATED = "created"
    UPDATED = "updated"
    DESCRIPTION = "description"
    LINKS = "links"
    COMMENTS = "comments"


class EditKind(Enum):
    INLINE_SINGLE_LINE = "inline_single_line"
    INLINE_MULTI_LINE = "inline_multi_line"
    MODAL_CHOICE = "modal_choice"
    SIDE_PANEL = "side_panel"

    @property
    def is_inline(self) -> bool:
        return self in (EditKind.INLINE_SINGLE_LINE, EditKind.INLINE_MULTI_LINE)


@dataclass(frozen=True)
class FieldSpec:
    id: FieldId
    label: str
    row: int
    column: int
    column_span: int = 1
    editable: bool = True
    edit_kind: EditKind = EditKind.INLINE_SINGLE_LINE


# (field, label, editable, edit kind, span); position comes from the layout.
CatalogEntry = Tuple[FieldId, str, bool, EditKind, int]
CatalogRows = Tuple[Tuple[FieldSpec, ...], ...]


def build_catalog(layout: Iterable[Sequence[CatalogEntry]]) -> CatalogRows:
    """Build positioned catalog rows from a per-row layout.

    Raises ValueError for duplicated fields, empty rows, non-positive spans
    or a layout without a single editable field.
    """
    rows = []
    seen: set[FieldId] = set()
    for row_idx, entries in enumerate(layout):
        if not entries:
            raise ValueError(f"Catalog row {row_idx} is empty")
        row = []
        for col_idx, (field_id, label, editable, kind, span) in enumerate(entries):
            if field_id in seen:
                raise ValueError(f"Field {field_id.name} appears more than once in the catalog")
            if span <= 0:
                raise ValueError(f"Field {field_id.name} has invalid column span {span}")
            if not isinstance(kind, EditKind):
                raise ValueError(f"Field {field_id.name} has no edit kind")
            seen.add(field_id)
            row.append(
                FieldSpec(
                    id=field_id,
                    label=label,
                    row=row_idx,
                    column=col_idx,
                    column_span=span,
                    editable=bool(editable),
                    edit_kind=kind,
                )
            )
        rows.append(tuple(row))
    if not any(spec.editable for row in rows for spec in row):
        raise ValueError("Catalog has no editable field")
    return tuple(rows)


def field_spec(rows: CatalogRows, field_id: FieldId) -> Optional[FieldSpec]:
    for row in rows:
        for spec in row:
            if spec.id == field_id:
                return spec
    return None


def editable_fields(rows: CatalogRows) -> Tuple[FieldSpec, ...]:
    """Editable specs in row-major order."""
    return tuple(spec for row in rows for spec in row if spec.editable)


_SINGLE = EditKind.INLINE_SINGLE_LINE
_MULTI = EditKind.INLINE_MULTI_LINE
_MODAL = EditKind.MODAL_CHOICE
_PANEL = EditKind.SIDE_PANEL

DEFAULT_LAYOUT: Tuple[Tuple[CatalogEntry, ...], ...] = (
    (
        (FieldId.PROJECT, "Project", False, _SINGLE, 1),
        (FieldId.KEY, "Key", False, _SINGLE, 1),
        (FieldId.SUMMARY, "Summary", True, _SINGLE, 3),
    ),
    (
        (FieldId.STATUS, "Status", True, _MODAL, 1),
        (FieldId.PRIORITY, "Priority", True, _MODAL, 1),
        (FieldId.ASSIGNEE, "Assignee", True, _MODAL, 1),
        (FieldId.REPORTER, "Reporter", False, _SINGLE, 1),
    ),
    (
        (FieldId.ISSUE_TYPE, "Type", False, _SINGLE, 1),
        (FieldId.LABELS, "Labels", True, _MODAL, 1),
        (FieldId.COMPONENTS, "Components", True, _MODAL, 2),
    ),
    (
        (FieldId.DUE_DATE, "Due", True, _SINGLE, 1),
        (FieldId.STORY_POINTS, "Story points", True, _SINGLE, 1),
    ),
    (
        (FieldId.CREATED, "Created", False, _SINGLE, 2),
        (FieldId.UPDATED, "Updated", False, _SINGLE, 2),
    ),
    (
        (FieldId.DESCRIPTION, "Description", True, _MULTI, 4),
    ),
    (
        (FieldId.LINKS, "Links", True, _PANEL, 2),
        (FieldId.COMMENTS, "Comments", True, _PANEL, 2),
    ),
)

DEFAULT_CATALOG: CatalogRows = build_catalog(DEFAULT_LAYOUT)


__all__ = [
    "FieldId",
    "EditKind",
    "FieldSpec",
    "CatalogEntry",
    "CatalogRows",
    "build_catalog",
    "field_spec",
    "editable_fields",
    "DEFAULT_LAYOUT",
    "DEFAULT_CATALOG",
]
