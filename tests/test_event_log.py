import pytest

from tallyboard.exceptions import InvalidEventException
from tallyboard.models import Event
from tallyboard.tournament import EventLog


def test_record_increments_counter_and_logs_event(tournament):
    log = EventLog()

    event = log.record(tournament, "a", "goals")

    assert event == Event(player_id="a", counter_kind="goals")
    assert tournament.get_player("a").session.goals == 4
    assert len(log) == 1


def test_record_then_undo_restores_counter(tournament):
    log = EventLog()
    before = tournament.get_player("c").session.goals

    log.record(tournament, "c", "goals")
    log.undo(tournament)

    assert tournament.get_player("c").session.goals == before
    assert not log.can_undo


def test_undo_is_lifo_one_step_per_call(tournament):
    log = EventLog()
    log.record(tournament, "a", "slaps")
    log.record(tournament, "b", "finals")

    undone = log.undo(tournament)

    assert undone.player_id == "b"
    assert tournament.get_player("b").session.finals == 0
    assert tournament.get_player("a").session.slaps == 1
    assert len(log) == 1


def test_undo_on_empty_log_is_noop(tournament):
    log = EventLog()

    assert log.undo(tournament) is None


def test_undo_never_goes_below_zero(tournament):
    log = EventLog()
    log.record(tournament, "b", "slaps")
    tournament.get_player("b").session.slaps = 0

    log.undo(tournament)

    assert tournament.get_player("b").session.slaps == 0


def test_unknown_player_is_ignored(tournament):
    log = EventLog()
    before = [p.to_dict() for p in tournament.players]

    assert log.record(tournament, "ghost", "goals") is None

    assert len(log) == 0
    assert [p.to_dict() for p in tournament.players] == before


def test_unknown_counter_kind_is_rejected(tournament):
    with pytest.raises(InvalidEventException):
        EventLog().record(tournament, "a", "own_goals")


def test_clear_forgets_events_but_keeps_counters(tournament):
    log = EventLog()
    log.record(tournament, "a", "misses")

    log.clear()

    assert log.undo(tournament) is None
    assert tournament.get_player("a").session.misses == 2
