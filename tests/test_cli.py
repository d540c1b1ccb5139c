import io
import json
from pathlib import Path

import pytest

from path_dict.__main__ import main


_DOCUMENT = {"user": {"first": "Jane", "last": "Doe", "password": "x"}, "id": 7}


@pytest.fixture
def stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(_DOCUMENT)))


@pytest.mark.usefixtures("stdin")
def test_cli_get_prints_json_value(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["get", "user.first"]) == 0
    assert json.loads(capsys.readouterr().out) == "Jane"


@pytest.mark.usefixtures("stdin")
def test_cli_get_missing_uses_default(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["get", "user.email", "--default", '"none"']) == 0
    assert json.loads(capsys.readouterr().out) == "none"


@pytest.mark.usefixtures("stdin")
def test_cli_set_prints_updated_document(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["set", "user.address.city", '"Saskatoon"']) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["user"]["address"] == {"city": "Saskatoon"}


@pytest.mark.usefixtures("stdin")
def test_cli_delete_multiple_paths(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["delete", "user.password", "id", "not.there"]) == 0
    assert json.loads(capsys.readouterr().out) == {"user": {"first": "Jane", "last": "Doe"}}


@pytest.mark.usefixtures("stdin")
def test_cli_exists_exit_status(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["exists", "user.last"]) == 0
    assert capsys.readouterr().out.strip() == "true"


@pytest.mark.usefixtures("stdin")
def test_cli_exists_missing_returns_one(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["exists", "user.email"]) == 1
    assert capsys.readouterr().out.strip() == "false"


@pytest.mark.usefixtures("stdin")
def test_cli_remap_object(capsys: pytest.CaptureFixture[str]) -> None:
    path_map = json.dumps({"user.first": "name.given", "id": "meta.id", "missing": "meta.extra"})
    assert main(["remap", path_map, "--no-create"]) == 0
    assert json.loads(capsys.readouterr().out) == {"name": {"given": "Jane"}, "meta": {"id": 7}}


def test_cli_remap_collection(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('[{"a": 1}, {"a": 2}]'))
    assert main(["remap", '{"a": "x"}']) == 0
    assert json.loads(capsys.readouterr().out) == [{"x": 1}, {"x": 2}]


@pytest.mark.usefixtures("stdin")
def test_cli_flatten_with_glue(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["flatten", "--glue", ": "]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "id: 7"


def test_cli_custom_delimiter_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    document = tmp_path / "doc.json"
    document.write_text(json.dumps(_DOCUMENT))
    assert main(["-d", "/", "-i", str(document), "get", "user/last"]) == 0
    assert json.loads(capsys.readouterr().out) == "Doe"


@pytest.mark.usefixtures("stdin")
def test_cli_type_mismatch_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["set", "id.value", "1"]) == 2
    assert "cannot traverse into non-mapping value at 'id'" in capsys.readouterr().err


def test_cli_invalid_json_reports_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("{not json"))
    assert main(["get", "a"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_cli_non_object_document_reports_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2]"))
    assert main(["get", "a"]) == 2
    assert "input document must be a JSON object" in capsys.readouterr().err


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip()


def test_cli_dash_input_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"a": {"b": 1}}'))
    assert main(["-i", "-", "get", "a.b"]) == 0
    assert json.loads(capsys.readouterr().out) == 1


def test_cli_missing_input_file_reports_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(tmp_path / "missing.json"), "get", "a"]) == 2
    assert capsys.readouterr().err.startswith("error:")
