from fractions import Fraction

from tallyboard.models import HistoryEntry, Player, SessionCounters


def test_accuracy_is_exact_fraction():
    counters = SessionCounters(goals=1, misses=2)

    assert counters.accuracy == Fraction(1, 3)
    assert counters.percentage == 33.3


def test_accuracy_without_attempts_is_zero():
    assert SessionCounters(finals=2).accuracy == 0
    assert SessionCounters().percentage == 0.0


def test_decrement_floors_at_zero():
    counters = SessionCounters(goals=1)

    assert counters.decrement("goals")
    assert not counters.decrement("goals")
    assert counters.goals == 0


def test_cumulative_values_include_session():
    player = Player(id="p1", name="Ana", total_slaps=2, total_goals=3, total_misses=1)
    player.session.slaps = 1
    player.session.misses = 4

    assert player.cumulative_slaps == 3
    assert player.cumulative_attempts == 8
    assert player.cumulative_percentage == 37.5


def test_player_from_dict_drops_session():
    player = Player.from_dict(
        {
            "id": "p1",
            "name": "Ana",
            "historyPoints": 4,
            "totalGoals": 1,
            "totalMisses": 0,
            "totalFinals": 0,
            "totalSlaps": 0,
            "session": {"goals": 9, "misses": 9, "finals": 9, "slaps": 9},
        }
    )

    assert player.session.is_idle
    assert player.history_points == 4


def test_played_at_parses_iso_and_legacy_timestamps():
    assert HistoryEntry("2026-10-19T21:30:05").played_at.hour == 21
    assert HistoryEntry("19 Oct 2026 9:30 PM").played_at.day == 19


def test_played_at_unreadable_timestamp_is_none():
    assert HistoryEntry("sometime last week").played_at is None
