from datetime import datetime

import pytest

from tallyboard.controllers import SessionController
from tallyboard.models import Player, SessionCounters
from tallyboard.tournament import Tournament

FIXED_TIME = datetime(2026, 10, 19, 21, 30, 5)


def make_player(player_id, name=None, history_points=0, **session):
    """Build a player with the given session counters."""
    return Player(
        id=player_id,
        name=name or player_id.upper(),
        history_points=history_points,
        session=SessionCounters(**session),
    )


@pytest.fixture
def three_players():
    # A: 75%, B: 100%, C: 50%
    return [
        make_player("a", goals=3, misses=1),
        make_player("b", goals=2, misses=0),
        make_player("c", goals=1, misses=1),
    ]


@pytest.fixture
def tournament(three_players):
    return Tournament("Friday Cup", three_players)


@pytest.fixture
def controller():
    controller = SessionController(clock=lambda: FIXED_TIME)
    controller.start_tournament("Friday Cup", ["Ana", "Bea", "Carla"])
    return controller


@pytest.fixture
def sample_document():
    return {
        "tournamentName": "Winter League",
        "players": [
            {
                "id": "p1",
                "name": "Ana",
                "historyPoints": 9,
                "totalGoals": 12,
                "totalMisses": 4,
                "totalFinals": 2,
                "totalSlaps": 1,
                "session": {"goals": 3, "misses": 1, "finals": 0, "slaps": 2},
            },
            {
                "id": "p2",
                "name": "Bea",
                "historyPoints": 7,
                "totalGoals": 8,
                "totalMisses": 8,
                "totalFinals": 1,
                "totalSlaps": 0,
                "session": {"goals": 0, "misses": 0, "finals": 0, "slaps": 0},
            },
        ],
        "sessionHistory": [
            {
                "date": "2026-10-12T20:15:00",
                "results": [
                    {"name": "Ana", "pts": 5, "goals": 6, "misses": 2},
                    {"name": "Bea", "pts": 4, "goals": 4, "misses": 4},
                ],
            }
        ],
    }
