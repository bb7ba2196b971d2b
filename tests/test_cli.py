"""Command line interface."""

import pytest

from graphql_route.cli import app, load_schema
from graphql_route.runtime.settings import RouteSettings, load_settings


def test_init_writes_default_settings(tmp_path, capsys):
    path = tmp_path / "graphql_route.yaml"

    assert app(["--settings", str(path), "init"]) == 0

    assert load_settings(path) == RouteSettings()
    assert f"Created {path}" in capsys.readouterr().out


def test_init_refuses_to_overwrite(tmp_path, capsys):
    path = tmp_path / "graphql_route.yaml"
    path.write_text("path: /custom\n")

    assert app(["--settings", str(path), "init"]) == 1
    assert "already exists" in capsys.readouterr().out
    assert load_settings(path).path == "/custom"

    assert app(["--settings", str(path), "init", "--force"]) == 0
    assert load_settings(path).path == "/graphql"


def test_no_command_prints_help(capsys):
    assert app([]) == 0
    assert "graphql-route" in capsys.readouterr().out


def test_load_schema(test_schema):
    assert load_schema("conftest:schema") is test_schema


@pytest.mark.parametrize("target", ["conftest", ":schema", "conftest:", "conftest:URL"])
def test_load_schema_rejects_bad_targets(target):
    with pytest.raises(ValueError):
        load_schema(target)


def test_serve_reports_missing_schema(tmp_path, capsys):
    settings = tmp_path / "graphql_route.yaml"

    assert app(["--settings", str(settings), "serve", "conftest:missing"]) == 1
    assert "Error loading schema" in capsys.readouterr().out
