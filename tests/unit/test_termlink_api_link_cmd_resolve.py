"""Unit tests for termlink.api.link.cmd_resolve."""

import json

from termlink.api.link.cmd_resolve import cmd_resolve
from tests.conftest import run_cmd


class TestCmdResolve:
    def test_resolves_workspace_relative(self, termlink_home, tmp_path):
        (tmp_path / "notes.txt").write_text("x")

        result = run_cmd(cmd_resolve, "./notes.txt", platform="linux", workspace=str(tmp_path))

        assert result.success
        assert result.output["candidate"] == str(tmp_path / "notes.txt")
        assert result.output["resolved"] == str(tmp_path / "notes.txt")
        assert result.output["warnings"] == []
        assert result.result == f"Resolved to {tmp_path / 'notes.txt'}"

    def test_workspace_from_config(self, termlink_home, tmp_path):
        (tmp_path / "notes.txt").write_text("x")
        (termlink_home / "config.json").write_text(json.dumps({"link": {"workspace_root": str(tmp_path)}}))

        result = run_cmd(cmd_resolve, "../" + tmp_path.name + "/notes.txt", platform="linux")

        assert result.success
        assert result.output["resolved"] == str(tmp_path / "notes.txt")

    def test_missing_file(self, termlink_home, tmp_path):
        result = run_cmd(cmd_resolve, "./gone.txt", platform="linux", workspace=str(tmp_path))

        assert result.success is False
        assert result.output["resolved"] is None
        assert result.output["warnings"] == [f"File does not exist: {tmp_path / 'gone.txt'}"]
        assert result.result == "Not a link: ./gone.txt"

    def test_no_workspace(self, termlink_home):
        result = run_cmd(cmd_resolve, "./x.txt", platform="linux")

        assert result.success is False
        assert result.output["candidate"] is None
        assert "not resolvable" in result.output["warnings"][0]

    def test_directory_is_not_a_link(self, termlink_home, tmp_path):
        result = run_cmd(cmd_resolve, str(tmp_path), platform="linux")
        assert result.success is False

    def test_tilde_uses_home(self, termlink_home, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "todo.md").write_text("")

        result = run_cmd(cmd_resolve, "~/todo.md", platform="mac")

        assert result.success
        assert result.output["platform"] == "mac"
        assert result.output["resolved"] == str(tmp_path / "todo.md")

    def test_unknown_platform(self, termlink_home):
        result = run_cmd(cmd_resolve, "/etc/hosts", platform="plan9")

        assert result.success is False
        assert result.output["errors"]
        assert result.output["platform"] == "plan9"
