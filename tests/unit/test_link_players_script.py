"""Tests for the link_players operator script."""

import json

import pytest

from scripts.link_players import format_summary, load_roster, main, parse_args, run


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps([
        {"leagueId": "wrexham", "playerId": "John Smith"},
        {"leagueId": "chester", "playerId": "John Smith", "displayName": "Johnny"},
        {"leagueId": "liverpool", "playerId": "Jon Smith"},
        {"leagueId": "manchester", "playerId": "Bob Jones"},
    ]))
    return path


def test_load_roster(roster_file):
    players = load_roster(roster_file)
    assert len(players) == 4
    assert players[1].display_name == "Johnny"


def test_parse_args_rejects_bad_confidence(roster_file):
    with pytest.raises(SystemExit):
        parse_args([str(roster_file), "--min-confidence", "1.5"])


def test_dry_run_writes_nothing(roster_file, tmp_path, capsys):
    output = tmp_path / "links.json"
    args = parse_args([str(roster_file), "--dry-run", "--output", str(output)])

    links = run(args)

    assert len(links) == 1
    assert not output.exists()
    assert "SUGGESTED PLAYER LINKS" in capsys.readouterr().out


def test_writes_links(roster_file, tmp_path):
    output = tmp_path / "links.json"

    assert main([str(roster_file), "--output", str(output), "--min-confidence", "0.8"]) == 0

    payload = json.loads(output.read_text())
    assert len(payload) == 1
    members = {(p["leagueId"], p["playerId"]) for p in payload[0]["linkedPlayers"]}
    assert members == {
        ("wrexham", "John Smith"),
        ("chester", "John Smith"),
        ("liverpool", "Jon Smith"),
    }
    assert payload[0]["id"].startswith("john-smith-")
    assert payload[0]["createdAt"] == payload[0]["updatedAt"]


def test_missing_roster_fails(tmp_path):
    assert main([str(tmp_path / "missing.json"), "--dry-run"]) == 1


def test_summary_without_matches():
    assert "No potential matches found." in format_summary({})
