from tallyboard.models import HistoryResult
from tallyboard.tournament import Tournament, finalize_session

from conftest import FIXED_TIME, make_player


def test_finalize_commits_points_and_counters(tournament):
    entry = finalize_session(tournament, clock=lambda: FIXED_TIME)

    a, b, c = tournament.players
    assert (a.history_points, b.history_points, c.history_points) == (4, 5, 3)
    assert (a.total_goals, a.total_misses) == (3, 1)
    assert (b.total_goals, b.total_misses) == (2, 0)
    assert entry.timestamp == "2026-10-19T21:30:05"
    assert entry.results == (
        HistoryResult(name="B", session_points=5, goals=2, misses=0),
        HistoryResult(name="A", session_points=4, goals=3, misses=1),
        HistoryResult(name="C", session_points=3, goals=1, misses=1),
    )


def test_finalize_resets_every_session_counter(tournament):
    tournament.players[0].session.slaps = 2
    tournament.players[2].session.finals = 1

    finalize_session(tournament)

    assert tournament.session_is_idle
    assert tournament.players[0].total_slaps == 2
    assert tournament.players[2].total_finals == 1


def test_finalize_appends_exactly_one_entry(tournament):
    finalize_session(tournament)
    finalize_session(tournament)

    assert len(tournament.session_history) == 2


def test_points_are_conserved(tournament):
    before = tournament.total_history_points

    entry = finalize_session(tournament)

    assert tournament.total_history_points - before == entry.total_points == 12


def test_second_finalize_is_zero_delta(tournament):
    finalize_session(tournament)
    points_after_first = [p.history_points for p in tournament.players]

    entry = finalize_session(tournament)

    assert [p.history_points for p in tournament.players] == points_after_first
    assert all(
        (r.session_points, r.goals, r.misses) == (0, 0, 0) for r in entry.results
    )


def test_history_sorted_by_awarded_points():
    players = [make_player(f"p{i}", goals=i, misses=6 - i) for i in range(7)]
    tournament = Tournament("Big", players)

    entry = finalize_session(tournament)

    points = [r.session_points for r in entry.results]
    assert points == sorted(points, reverse=True)
    assert [r.name for r in entry.results[:2]] == ["P6", "P5"]


def test_history_entry_is_a_snapshot(tournament):
    entry = finalize_session(tournament)

    tournament.players[1].name = "Renamed"

    assert entry.results[0].name == "B"
