from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .field_catalog import FieldId


@dataclass(frozen=True)
class IssueSnapshot:
    """Read-only field values of one issue as last fetched by the host."""

    key: str
    summary: str = ""
    project: str = ""
    issue_type: str = ""
    description: str = ""
    status: str = ""
    priority: str = ""
    assignee: Optional[str] = None
    reporter: Optional[str] = None
    labels: Tuple[str, ...] = ()
    components: Tuple[str, ...] = ()
    due_date: Optional[str] = None
    story_points: Optional[float] = None
    created: str = ""
    updated: str = ""
    links_count: int = 0
    comments_count: int = 0
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    def value_for(self, field_id: FieldId) -> str:
        """Text form of a field, used to seed inline editors and status lines."""
        if field_id == FieldId.LABELS:
            return ", ".join(self.labels)
        if field_id == FieldId.COMPONENTS:
            return ", ".join(self.components)
        if field_id == FieldId.STORY_POINTS:
            return _format_points(self.story_points)
        if field_id == FieldId.LINKS:
            return str(self.links_count)
        if field_id == FieldId.COMMENTS:
            return str(self.comments_count)
        raw = getattr(self, field_id.value, None)
        return "" if raw is None else str(raw)

    @classmethod
    def from_values(cls, key: str, values: Dict[str, Any]) -> "IssueSnapshot":
        """Build a snapshot from a flat ``{field name: value}`` mapping.

        Unknown names are kept in ``extra``; list values for labels and
        components are normalised to tuples.
        """
        known = {name for name in cls.__dataclass_fields__ if name not in {"key", "extra"}}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for name, value in (values or {}).items():
            if name in known:
                kwargs[name] = value
            else:
                extra[name] = value
        for name in ("labels", "components"):
            if name in kwargs:
                kwargs[name] = tuple(str(item) for item in (kwargs[name] or ()))
        return cls(key=key, extra=extra, **kwargs)


def _format_points(points: Any) -> str:
    if points is None or points == "":
        return ""
    try:
        value = float(points)
    except (TypeError, ValueError):
        return str(points)
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"


__all__ = ["IssueSnapshot"]
