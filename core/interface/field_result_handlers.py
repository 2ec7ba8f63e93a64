"""Handlers for results the host reports back after fulfilling an intent."""

import logging
from typing import Optional, Tuple

from application.ports import ExternalResult
from core import FieldId, field_spec

logger = logging.getLogger("issue_fields.edit")


def handle_external_result(tui, result: ExternalResult) -> Optional[Tuple[FieldId, str]]:
    """Consume a picker/panel result; forward a new value to the host for saving.

    Results for a field other than the pending one, or arriving after
    field-edit mode was left, are stale and dropped.
    """
    state = tui.field_edit
    if not state.consume_pending(result.field_id):
        logger.warning("Ignoring stale result for %s", result.field_id.value)
        return None
    if result.cancelled or result.value is None:
        logger.debug("%s edit cancelled by host", result.field_id.value)
        tui.field_host.force_render()
        return None
    tui.field_host.submit_field_update(result.field_id, result.value)
    tui.field_host.force_render()
    return result.field_id, result.value


def handle_persistence_outcome(tui, field_id: FieldId, ok: bool, message: str = "") -> None:
    label = _field_label(tui, field_id)
    if ok:
        tui.field_host.notify(message or f"{label} updated")
    else:
        logger.warning("Saving %s failed: %s", field_id.value, message or "unknown error")
        tui.field_host.notify(message or f"Could not update {label}")
    tui.field_host.force_render()


def _field_label(tui, field_id: FieldId) -> str:
    spec = field_spec(tui.field_edit.catalog, field_id)
    return spec.label if spec else field_id.value


__all__ = ["handle_external_result", "handle_persistence_outcome"]
