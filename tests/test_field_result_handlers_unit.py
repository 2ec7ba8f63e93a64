import logging
from types import SimpleNamespace

from application.ports import ExternalResult
from core import FieldEditState, FieldId, GridPosition, IssueSnapshot, field_spec
from core.interface import field_result_handlers


class Host(SimpleNamespace):
    def __init__(self):
        super().__init__(updates=[], messages=[], renders=0)

    def submit_field_update(self, field_id, value):
        self.updates.append((field_id, value))

    def notify(self, message):
        self.messages.append(message)

    def force_render(self):
        self.renders += 1


def _tui(pending=None):
    state = FieldEditState()
    state.enter()
    if pending is not None:
        spec = field_spec(state.catalog, pending)
        state.grid.cursor = GridPosition(spec.row, spec.column)
        state.activate(IssueSnapshot(key="P-1"))
    return SimpleNamespace(field_edit=state, field_host=Host())


def test_result_for_pending_field_is_submitted():
    tui = _tui(pending=FieldId.PRIORITY)
    result = ExternalResult(FieldId.PRIORITY, "Highest")
    assert field_result_handlers.handle_external_result(tui, result) == (FieldId.PRIORITY, "Highest")
    assert tui.field_host.updates == [(FieldId.PRIORITY, "Highest")]
    assert tui.field_edit.pending_field is None
    assert tui.field_edit.focused_field().id == FieldId.PRIORITY


def test_cancelled_result_clears_pending_without_submit():
    tui = _tui(pending=FieldId.ASSIGNEE)
    assert field_result_handlers.handle_external_result(tui, ExternalResult.cancel(FieldId.ASSIGNEE)) is None
    assert tui.field_host.updates == []
    assert tui.field_edit.pending_field is None
    assert tui.field_host.renders == 1


def test_stale_result_for_other_field_ignored(caplog):
    tui = _tui(pending=FieldId.STATUS)
    with caplog.at_level(logging.WARNING, logger="issue_fields.edit"):
        assert field_result_handlers.handle_external_result(tui, ExternalResult(FieldId.LABELS, "x")) is None
    assert tui.field_host.updates == []
    assert tui.field_edit.pending_field == FieldId.STATUS
    assert "stale" in caplog.text


def test_result_after_exit_ignored():
    tui = _tui(pending=FieldId.STATUS)
    tui.field_edit.exit()
    assert field_result_handlers.handle_external_result(tui, ExternalResult(FieldId.STATUS, "Done")) is None
    assert tui.field_host.updates == []


def test_second_result_for_same_intent_ignored():
    tui = _tui(pending=FieldId.COMMENTS)
    field_result_handlers.handle_external_result(tui, ExternalResult(FieldId.COMMENTS, "ok"))
    assert field_result_handlers.handle_external_result(tui, ExternalResult(FieldId.COMMENTS, "again")) is None
    assert tui.field_host.updates == [(FieldId.COMMENTS, "ok")]


def test_persistence_success_notifies_with_label():
    tui = _tui()
    field_result_handlers.handle_persistence_outcome(tui, FieldId.STORY_POINTS, True)
    assert tui.field_host.messages == ["Story points updated"]


def test_persistence_failure_uses_host_message(caplog):
    tui = _tui()
    with caplog.at_level(logging.WARNING, logger="issue_fields.edit"):
        field_result_handlers.handle_persistence_outcome(tui, FieldId.SUMMARY, False, "403 Forbidden")
    assert tui.field_host.messages == ["403 Forbidden"]
    assert "summary" in caplog.text


def test_persistence_failure_default_message():
    tui = _tui()
    field_result_handlers.handle_persistence_outcome(tui, FieldId.DUE_DATE, False)
    assert tui.field_host.messages == ["Could not update Due"]


def test_persistence_outcome_leaves_state_untouched():
    tui = _tui()
    position = tui.field_edit.position()
    field_result_handlers.handle_persistence_outcome(tui, FieldId.SUMMARY, True)
    assert tui.field_edit.position() == position
