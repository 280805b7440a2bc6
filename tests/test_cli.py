"""Tests for the mission-control command line."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from mission_control import MissionControl, cli


def run_cli(mc: MissionControl, *args: str) -> None:
    with patch.object(cli.MissionControl, "from_settings", return_value=mc), patch("sys.argv", ["mission-control", *args]):
        cli.main()


class TestCli:
    def test_seed_then_status(self, mc: MissionControl, capsys: pytest.CaptureFixture[str]) -> None:
        run_cli(mc, "seed")
        out = capsys.readouterr().out
        assert "Seeded" in out
        assert "Warning: using the in-memory store" in out

        run_cli(mc, "status")
        out = capsys.readouterr().out
        assert "In Progress" in out
        assert "Agents: 8 (1 working)" in out

    def test_serve_delegates_to_server(self, mc: MissionControl) -> None:
        with patch("api.server.run_http") as mock_run_http:
            run_cli(mc, "serve")

        mock_run_http.assert_called_once_with()

    def test_no_command_prints_help(self, mc: MissionControl, capsys: pytest.CaptureFixture[str]) -> None:
        run_cli(mc)

        assert "usage" in capsys.readouterr().out.lower()

    def test_shared_store_prints_no_warning(self, mc: MissionControl, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(cli, "InMemoryDocumentStore", new=type("Unused", (), {})):
            run_cli(mc, "status")

        assert "Warning" not in capsys.readouterr().out
