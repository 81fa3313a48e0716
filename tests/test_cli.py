import json
from pathlib import Path

from typer.testing import CliRunner

from restgen.cli import app

FIXTURE = Path(__file__).parent / "fixtures" / "endpoints.json"

runner = CliRunner()


def test_generate_command(tmp_path: Path):
    out_dir = tmp_path / "out"
    result = runner.invoke(app, ["generate", "--catalog", str(FIXTURE), "--out-dir", str(out_dir)])

    assert result.exit_code == 0, result.output
    assert result.stdout.count("Types written to") == 2
    assert (out_dir / "method-types.ts").exists()
    assert (out_dir / "parameters-and-response-types.ts").exists()


def test_generate_missing_catalog_exits_nonzero(tmp_path: Path):
    result = runner.invoke(
        app, ["generate", "--catalog", str(tmp_path / "missing.json"), "--out-dir", str(tmp_path / "out")]
    )

    assert result.exit_code == 1
    assert not (tmp_path / "out").exists()


def test_generate_unknown_formatter_exits_nonzero(tmp_path: Path):
    result = runner.invoke(
        app, ["generate", "--catalog", str(FIXTURE), "--out-dir", str(tmp_path / "out"), "--formatter", "black"]
    )
    assert result.exit_code == 1


def test_routes_json():
    result = runner.invoke(app, ["routes", "--catalog", str(FIXTURE), "--format", "json", "--scope", "issues"])

    assert result.exit_code == 0, result.output
    rows = json.loads(result.stdout)
    assert rows == [
        {
            "scope": "issues",
            "id": "lock",
            "method": "PUT",
            "url": "/repos/{owner}/{repo}/issues/{issue_number}/lock",
            "description": "Lock an issue",
            "has_required_previews": False,
            "deprecated": "octokit.rest.issues.lock() is deprecated, see https://x",
        }
    ]


def test_routes_table():
    result = runner.invoke(app, ["routes", "--catalog", str(FIXTURE)])

    assert result.exit_code == 0, result.output
    assert "Routes: 6" in result.stdout


def test_routes_bad_format():
    result = runner.invoke(app, ["routes", "--catalog", str(FIXTURE), "--format", "xml"])
    assert result.exit_code != 0


def test_routes_verbose_logs_route_table():
    result = runner.invoke(app, ["routes", "--catalog", str(FIXTURE), "-v"])

    assert result.exit_code == 0, result.output
    assert "Route table: 4 scopes, 6 methods" in result.output
