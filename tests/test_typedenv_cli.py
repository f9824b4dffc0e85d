import json

import pytest

from typed_dotenv.dotenv import Dotenv
from typed_dotenv.value import Integer, String
from typedenv import cli


def test_cli_show_text(fixture_env, capsys) -> None:
    rc = cli.main(["show", "--path", str(fixture_env)])
    assert rc == 0
    out = capsys.readouterr().out
    assert "BUILD_NUMBER=5  (integer)" in out
    assert "NETWORK_TIMEOUT=10.5  (float)" in out


def test_cli_show_json(fixture_env, capsys) -> None:
    rc = cli.main(["show", "--json", "--path", str(fixture_env)])
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0] == {"key": "API_KEY", "type": "string", "value": "some-value"}
    assert payload[-1] == {"key": "ONBOARDING_ENABLED", "type": "boolean", "value": True}


def test_cli_get_prefers_file_then_process(fixture_env, monkeypatch, capsys) -> None:
    monkeypatch.setenv("ONLY_PROCESS", "7")
    monkeypatch.setenv("API_KEY", "process-value")
    assert cli.main(["get", "API_KEY", "--path", str(fixture_env)]) == 0
    assert cli.main(["get", "ONLY_PROCESS", "--path", str(fixture_env)]) == 0
    assert capsys.readouterr().out.splitlines() == ["some-value", "7"]


def test_cli_get_with_process_first_fallback(fixture_env, monkeypatch, capsys) -> None:
    monkeypatch.setenv("API_KEY", "process-value")
    assert cli.main(["get", "API_KEY", "--fallback", "process,store", "--path", str(fixture_env)]) == 0
    assert capsys.readouterr().out.strip() == "process-value"


def test_cli_get_missing_key(fixture_env, capsys) -> None:
    assert cli.main(["get", "NOT_THERE", "--path", str(fixture_env)]) == 1
    assert "NOT_THERE is not set" in capsys.readouterr().err
    assert cli.main(["get", "NOT_THERE", "--default", "3", "--path", str(fixture_env)]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_cli_get_without_file_uses_process_env(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("ONLY_PROCESS", "x")
    assert cli.main(["get", "ONLY_PROCESS", "--path", str(tmp_path / "absent.env")]) == 0
    assert capsys.readouterr().out.strip() == "x"


def test_cli_set_and_unset(fixture_env) -> None:
    assert cli.main(["set", "BUILD_NUMBER", "6", "--path", str(fixture_env)]) == 0
    assert cli.main(["set", "NEW_KEY", "hello", "--path", str(fixture_env)]) == 0
    store = Dotenv().load(fixture_env)
    assert store["BUILD_NUMBER"] == Integer(6)
    assert list(store)[-1] == "NEW_KEY"

    assert cli.main(["unset", "NEW_KEY", "--path", str(fixture_env)]) == 0
    assert "NEW_KEY" not in Dotenv().load(fixture_env)


def test_cli_set_no_overwrite(fixture_env) -> None:
    assert cli.main(["set", "API_KEY", "other", "--no-overwrite", "--path", str(fixture_env)]) == 0
    assert Dotenv().load(fixture_env)["API_KEY"] == String("some-value")


def test_cli_set_requires_create_for_new_file(tmp_path) -> None:
    target = tmp_path / "new.env"
    with pytest.raises(SystemExit):
        cli.main(["set", "A", "1", "--path", str(target)])
    assert cli.main(["set", "A", "1", "--create", "--path", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "A=1\n"


def test_cli_set_rejects_empty_value(fixture_env) -> None:
    with pytest.raises(SystemExit):
        cli.main(["set", "A", "", "--path", str(fixture_env)])


def test_cli_check(fixture_env, tmp_path, capsys) -> None:
    assert cli.main(["check", "--path", str(fixture_env)]) == 0
    assert "[check] OK" in capsys.readouterr().out

    bad = tmp_path / "bad.env"
    bad.write_text("A=1\nB=2=3\n", encoding="utf-8")
    assert cli.main(["check", "--path", str(bad)]) == 1
    assert "line 2" in capsys.readouterr().out


def test_cli_reads_settings_from_environment(tmp_path, monkeypatch, capsys) -> None:
    path = tmp_path / "colon.env"
    path.write_text("PORT:8080\n", encoding="utf-8")
    monkeypatch.setenv("TYPED_DOTENV_PATH", str(path))
    monkeypatch.setenv("TYPED_DOTENV_DELIMITER", ":")
    assert cli.main(["show"]) == 0
    assert "PORT:8080  (integer)" in capsys.readouterr().out


def test_cli_invalid_delimiter_exits(fixture_env) -> None:
    with pytest.raises(SystemExit):
        cli.main(["show", "--delimiter", "==", "--path", str(fixture_env)])


@pytest.mark.parametrize("key, value", [("URL", "http://h/?a=b"), ("A=B", "1"), ("NOTE", "two\nlines")])
def test_cli_set_refuses_values_that_would_corrupt_file(fixture_env, key, value) -> None:
    before = fixture_env.read_text(encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["set", key, value, "--path", str(fixture_env)])
    assert "cannot store" in str(excinfo.value)
    assert fixture_env.read_text(encoding="utf-8") == before
    assert cli.main(["check", "--path", str(fixture_env)]) == 0


def test_cli_set_quoted_empty_value(fixture_env) -> None:
    assert cli.main(["set", "TITLE", '""', "--path", str(fixture_env)]) == 0
    assert 'TITLE=""\n' in fixture_env.read_text(encoding="utf-8")
    assert Dotenv().load(fixture_env)["TITLE"] == String("")
