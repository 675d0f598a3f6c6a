import copy
import json

import pytest

from tallyboard.exceptions import FileLoadException, MalformedDocumentException
from tallyboard.tournament import Tournament
from tallyboard.tournament.document import (
    default_export_filename,
    dumps_document,
    export_document,
    import_document,
    load_file,
    loads_document,
    save_file,
)

from conftest import make_player


def _zero_sessions(document):
    expected = copy.deepcopy(document)
    for player in expected["players"]:
        player["session"] = {"goals": 0, "misses": 0, "finals": 0, "slaps": 0}
    return expected


def test_round_trip_zeroes_sessions(sample_document):
    exported = export_document(import_document(sample_document))

    assert exported == _zero_sessions(sample_document)


def test_import_resets_session_counters(sample_document):
    tournament = import_document(sample_document)

    assert tournament.session_is_idle
    assert tournament.get_player("p1").total_goals == 12


def test_missing_history_defaults_to_empty(sample_document):
    del sample_document["sessionHistory"]

    tournament = import_document(sample_document)

    assert tournament.session_history == []
    assert export_document(tournament)["sessionHistory"] == []


def test_history_is_loaded(sample_document):
    (entry,) = import_document(sample_document).session_history

    assert entry.timestamp == "2026-10-12T20:15:00"
    assert entry.results[0].session_points == 5


def test_export_includes_pending_session():
    tournament = Tournament("Cup", [make_player("a", goals=2, slaps=1)])

    exported = export_document(tournament)

    assert exported["players"][0]["session"] == {
        "goals": 2,
        "misses": 0,
        "finals": 0,
        "slaps": 1,
    }


@pytest.mark.parametrize(
    "mutate, path",
    [
        (lambda d: d.pop("tournamentName"), "tournamentName"),
        (lambda d: d.pop("players"), "players"),
        (lambda d: d["players"][1].pop("totalGoals"), "players[1].totalGoals"),
        (lambda d: d["players"][0].update(historyPoints="9"), "players[0].historyPoints"),
        (lambda d: d["players"][0].update(totalSlaps=-1), "players[0].totalSlaps"),
        (lambda d: d["players"][0].update(totalFinals=True), "players[0].totalFinals"),
        (lambda d: d["players"][1].update(id="p1"), "players[1].id"),
        (lambda d: d["sessionHistory"][0].pop("date"), "sessionHistory[0].date"),
        (
            lambda d: d["sessionHistory"][0]["results"][1].pop("pts"),
            "sessionHistory[0].results[1].pts",
        ),
    ],
)
def test_malformed_documents_name_the_field(sample_document, mutate, path):
    mutate(sample_document)

    with pytest.raises(MalformedDocumentException) as excinfo:
        import_document(sample_document)

    assert excinfo.value.path == path


def test_non_object_document_is_malformed():
    with pytest.raises(MalformedDocumentException):
        import_document(["not", "a", "document"])


def test_invalid_json_is_malformed():
    with pytest.raises(MalformedDocumentException):
        loads_document("{tournamentName: ")


def test_dumps_and_loads_text(sample_document):
    text = dumps_document(import_document(sample_document))

    assert json.loads(text)["tournamentName"] == "Winter League"
    assert loads_document(text).name == "Winter League"


def test_save_and_load_file(tmp_path, sample_document):
    tournament = import_document(sample_document)

    path = save_file(tournament, tmp_path / "league.json")

    assert load_file(path).to_dict() == tournament.to_dict()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileLoadException):
        load_file(tmp_path / "missing.json")


def test_latin1_encoded_file_is_malformed(tmp_path, sample_document):
    sample_document["players"][0]["name"] = "Peñas"
    path = tmp_path / "league.json"
    path.write_bytes(json.dumps(sample_document, ensure_ascii=False).encode("latin-1"))

    with pytest.raises(MalformedDocumentException, match="UTF-8"):
        load_file(path)


def test_binary_file_is_malformed(tmp_path):
    path = tmp_path / "league.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(MalformedDocumentException):
        load_file(path)


def test_deeply_nested_json_is_malformed():
    with pytest.raises(MalformedDocumentException):
        loads_document("[" * 100000 + "]" * 100000)


def test_default_export_filename():
    tournament = Tournament("Cup 2026/27", [])

    assert default_export_filename(tournament) == "Cup 2026_27_fin.json"
