import json
from pathlib import Path

import yaml


def test_version(termlinkc):
    result = termlinkc("--version")
    assert result.returncode == 0
    assert result.stdout.startswith("termlinkc ")


def test_resolve_existing_file(termlinkc, tmp_path):
    (tmp_path / "main.py").write_text("")

    result = termlinkc("--display", "json", "link", "resolve", "./main.py", "--platform", "linux", "-w", str(tmp_path))

    assert result.returncode == 0, result.stderr
    output = json.loads(result.stdout)
    assert output["success"] is True
    assert output["resolved"] == str(tmp_path / "main.py")


def test_resolve_missing_file(termlinkc, tmp_path):
    result = termlinkc("--display", "json", "link", "resolve", "./absent.py", "-p", "linux", "-w", str(tmp_path))

    assert result.returncode == 1
    assert json.loads(result.stdout)["success"] is False


def test_scan_stdin(termlinkc):
    result = termlinkc(
        "--display", "json", "link", "scan", "--platform", "linux", "--no-validate",
        input_text="open https://example.com or /var/log/syslog\n",
    )

    assert result.returncode == 0, result.stderr
    output = json.loads(result.stdout)
    assert [link["kind"] for link in output["links"]] == ["hypertext", "local"]


def test_logging_goes_to_home(termlinkc, smoke_env, tmp_path):
    termlinkc("link", "resolve", "/etc/hosts", "-p", "linux")
    assert (Path(smoke_env["TERMLINK_HOME"]) / "termlink.log").exists()


def test_bad_display_format(termlinkc):
    result = termlinkc("--display", "xml", "link", "resolve", "/x")
    assert result.returncode == 1
    assert "--display must be" in result.stderr


def test_default_display_is_yaml(termlinkc, tmp_path):
    (tmp_path / "main.py").write_text("")

    result = termlinkc("link", "resolve", "./main.py", "-p", "linux", "-w", str(tmp_path))

    assert result.returncode == 0, result.stderr
    assert not result.stdout.lstrip().startswith("{")
    output = yaml.safe_load(result.stdout)
    assert output["success"] is True
    assert output["resolved"] == str(tmp_path / "main.py")
