"""Test the command line interface."""
import json

from hive_engine.cli import main


class TestCli:
    """Test CLI commands against the demo neighbourhood."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_groups_json(self, capsys):
        assert main(["groups", "--demo", "--json"]) == 0

        groups = json.loads(capsys.readouterr().out)
        assert groups[0]["name"] == "Creative Bees"

    def test_hive_json(self, capsys):
        assert main(["hive", "--demo", "--json", "--width", "400", "--height", "800"]) == 0

        body = json.loads(capsys.readouterr().out)
        assert body["stats"]["cellCount"] == 16

    def test_hive_text(self, capsys):
        assert main(["hive", "--demo"]) == 0

        out = capsys.readouterr().out
        assert "Hive for user-1" in out
        assert "event-8" in out

    def test_recommend_text(self, capsys):
        assert main(["recommend", "--demo", "--limit", "2"]) == 0

        out = capsys.readouterr().out
        assert "Sarah Chen" in out
        assert "2 shared events" in out

    def test_recommend_unknown_user(self, capsys):
        assert main(["recommend", "--demo", "--user", "nobody"]) == 1

    def test_stats_json(self, capsys):
        assert main(["stats", "--demo", "--json"]) == 0

        stats = json.loads(capsys.readouterr().out)
        assert stats["nodeCount"] == 16
