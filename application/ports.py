from dataclasses import dataclass
from typing import Optional, Protocol

from core import FieldId, Intent


@dataclass(frozen=True)
class ExternalResult:
    """Outcome of a picker or panel the host opened for a field."""

    field_id: FieldId
    value: Optional[str] = None
    cancelled: bool = False

    @classmethod
    def cancel(cls, field_id: FieldId) -> "ExternalResult":
        return cls(field_id=field_id, cancelled=True)


class FieldEditHost(Protocol):
    def fulfill_intent(self, intent: Intent) -> None:
        ...

    def submit_field_update(self, field_id: FieldId, value: str) -> None:
        ...

    def notify(self, message: str) -> None:
        ...

    def force_render(self) -> None:
        ...
