import pytest

from tallyboard.tournament import RankingEngine, points_for_rank

from conftest import make_player


def _ids(players):
    return [p.id for p in players]


@pytest.mark.parametrize(
    "position, points",
    [(0, 5), (1, 4), (2, 3), (3, 2), (4, 1), (5, 0), (11, 0)],
)
def test_points_for_rank_table(position, points):
    assert points_for_rank(position) == points


def test_points_for_rank_rejects_negative_position():
    with pytest.raises(ValueError):
        points_for_rank(-1)


def test_session_ranking_orders_by_accuracy(three_players):
    engine = RankingEngine()

    ranked = engine.session_ranking(three_players)

    assert _ids(ranked) == ["b", "a", "c"]
    assert engine.session_points(three_players) == {"b": 5, "a": 4, "c": 3}


def test_session_ranking_goals_break_accuracy_ties():
    players = [
        make_player("a", goals=1, misses=1),
        make_player("b", goals=2, misses=2),
    ]

    assert _ids(RankingEngine().session_ranking(players)) == ["b", "a"]


def test_session_ranking_fewer_slaps_rank_higher():
    players = [
        make_player("a", goals=2, misses=1, slaps=3),
        make_player("b", goals=2, misses=1, slaps=1),
    ]

    assert _ids(RankingEngine().session_ranking(players)) == ["b", "a"]


def test_session_ranking_finals_then_roster_order():
    players = [
        make_player("a", goals=1, misses=1, slaps=1, finals=0),
        make_player("b", goals=1, misses=1, slaps=1, finals=2),
        make_player("c", goals=1, misses=1, slaps=1, finals=0),
        make_player("d", goals=1, misses=1, slaps=1, finals=2),
    ]

    assert _ids(RankingEngine().session_ranking(players)) == ["b", "d", "a", "c"]


def test_no_attempts_counts_as_zero_accuracy():
    players = [
        make_player("idle", slaps=0, finals=3),
        make_player("cold", goals=0, misses=4),
        make_player("hot", goals=1, misses=9),
    ]

    ranked = RankingEngine().session_ranking(players)

    assert _ids(ranked)[0] == "hot"
    # idle and cold tie on accuracy and goals; no slaps either, finals decide
    assert _ids(ranked)[1:] == ["idle", "cold"]


def test_ranking_is_deterministic(three_players):
    engine = RankingEngine()

    assert engine.session_points(three_players) == engine.session_points(
        list(three_players)
    )


def test_sixth_place_and_beyond_earn_nothing():
    players = [make_player(f"p{i}", goals=10 - i, misses=i) for i in range(7)]

    points = RankingEngine().session_points(players)

    assert [points[f"p{i}"] for i in range(7)] == [5, 4, 3, 2, 1, 0, 0]


def test_idle_session_awards_no_points():
    players = [make_player("a"), make_player("b"), make_player("c")]

    assert RankingEngine().session_points(players) == {"a": 0, "b": 0, "c": 0}


def test_ranking_does_not_mutate_players(three_players):
    before = [p.to_dict() for p in three_players]

    RankingEngine().leaderboard(three_players)

    assert [p.to_dict() for p in three_players] == before


def test_live_ranking_adds_session_points_to_history():
    players = [
        make_player("a", history_points=10, goals=0, misses=3),
        make_player("b", history_points=7, goals=3, misses=0),
    ]

    rows = RankingEngine().leaderboard(players)

    # b: 7 + 5 = 12, a: 10 + 4 = 14
    assert [(r.player_id, r.live_total, r.session_points) for r in rows] == [
        ("a", 14, 4),
        ("b", 12, 5),
    ]
    assert rows[0].position == 1
    assert rows[1].percentage == 100.0


def test_live_ranking_tie_breaks_on_cumulative_slaps_then_finals():
    players = [
        make_player("a", history_points=3),
        make_player("b", history_points=3),
        make_player("c", history_points=3),
    ]
    players[0].total_slaps = 2
    players[1].total_slaps = 1
    players[2].total_slaps = 1
    players[2].total_finals = 2

    ranked = RankingEngine().live_ranking(players)

    assert _ids(ranked) == ["c", "b", "a"]


def test_live_ranking_fully_equal_keeps_roster_order():
    players = [make_player(pid, history_points=4) for pid in ("x", "y", "z")]

    assert _ids(RankingEngine().live_ranking(players)) == ["x", "y", "z"]


def test_final_summary_uses_cumulative_figures():
    player = make_player("a", history_points=2, goals=1, misses=1, finals=1)
    player.total_goals = 3
    player.total_misses = 3

    (row,) = RankingEngine().final_summary([player])

    assert row.points == 2 + 5
    assert (row.goals, row.misses, row.attempts) == (4, 4, 8)
    assert row.percentage == 50.0
    assert row.finals == 1


def test_unknown_mode_is_rejected(three_players):
    with pytest.raises(ValueError):
        RankingEngine().rank(three_players, "weekly")
