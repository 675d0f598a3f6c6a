import pytest

from tallyboard.console import ConsoleApp, QuitConsole, create_parser


@pytest.fixture
def app(controller):
    return ConsoleApp(controller)


def test_scoring_by_number_and_name(app):
    app.execute("goal 1")
    output = app.execute("miss carla")

    players = app.controller.get_players()
    assert players[0].session.goals == 1
    assert players[2].session.misses == 1
    assert output.startswith("Carla:")


def test_unknown_player_is_reported(app):
    assert "No player matches" in app.execute("goal 9")
    assert "No player matches" in app.execute("goal Zoe")
    assert "No player matches" in app.execute("goal ²")


def test_undo_command(app):
    assert app.execute("undo") == "Nothing to undo."

    app.execute("slap 2")

    assert app.execute("undo") == "Undid slaps for Bea."
    assert app.controller.get_players()[1].session.slaps == 0


def test_board_lists_every_player(app):
    app.execute("goal Bea")

    lines = app.execute("board").splitlines()

    assert len(lines) == 4
    assert "Bea" in lines[1]


def test_finalize_saves_and_reports_history(app, tmp_path):
    app.execute("goal 1")

    output = app.execute(f"finalize {tmp_path / 'cup.json'}")

    assert "12 points awarded" in output
    assert (tmp_path / "cup.json").exists()
    assert app.execute("history").startswith("Session 1 (2026-10-19 21:30)")


def test_unknown_command_and_quit(app):
    assert "Unknown command" in app.execute("dance")
    assert app.execute("   ") == ""
    with pytest.raises(QuitConsole):
        app.execute("/quit")


def test_parser_requires_a_source():
    parser = create_parser()

    args = parser.parse_args(["--new", "Cup", "--player", "Ana", "--player", "Bea"])

    assert args.new == "Cup"
    assert args.player == ["Ana", "Bea"]
    with pytest.raises(SystemExit):
        parser.parse_args([])
