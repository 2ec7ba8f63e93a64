from .field_catalog import (
    FieldId,
    EditKind,
    FieldSpec,
    CatalogRows,
    build_catalog,
    field_spec,
    editable_fields,
    DEFAULT_LAYOUT,
    DEFAULT_CATALOG,
)
from .field_grid import Direction, GridPosition, FieldGrid
from .issue_snapshot import IssueSnapshot
from .inline_editor import ActiveEditor
from .editor_dispatch import (
    Intent,
    OpenInlineEditor,
    OpenModalPicker,
    OpenPanel,
    intent_for,
    describe_intent,
)
from .field_edit_state import EditMode, FieldEditState

__all__ = [
    # Catalog
    "FieldId",
    "EditKind",
    "FieldSpec",
    "CatalogRows",
    "build_catalog",
    "field_spec",
    "editable_fields",
    "DEFAULT_LAYOUT",
    "DEFAULT_CATALOG",
    # Grid
    "Direction",
    "GridPosition",
    "FieldGrid",
    # Editing
    "IssueSnapshot",
    "ActiveEditor",
    "Intent",
    "OpenInlineEditor",
    "OpenModalPicker",
    "OpenPanel",
    "intent_for",
    "describe_intent",
    "EditMode",
    "FieldEditState",
]
