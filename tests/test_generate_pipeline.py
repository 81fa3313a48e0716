from pathlib import Path
import shutil

import pytest

from restgen.catalog.loader import load_catalog
from restgen.config import GeneratorConfig
from restgen.errors import CatalogError, FormatError
from restgen.orchestrator import pipeline
from restgen.orchestrator.pipeline import generate_documents, run_generate

FIXTURE = Path(__file__).parent / "fixtures" / "endpoints.json"


def make_config(tmp_path: Path, **kw) -> GeneratorConfig:
    catalog = tmp_path / "generated" / "endpoints.json"
    catalog.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy(FIXTURE, catalog)
    return GeneratorConfig(**kw).resolve(tmp_path)


def test_run_generate_writes_both_files_and_reports(tmp_path: Path):
    config = make_config(tmp_path)
    lines: list[str] = []

    result = run_generate(config, echo=lines.append)

    method_types = tmp_path / "src" / "generated" / "method-types.ts"
    params = tmp_path / "src" / "generated" / "parameters-and-response-types.ts"
    assert method_types.exists() and params.exists()
    assert lines == [f"Types written to {method_types}", f"Types written to {params}"]

    # teams.legacyGet is obsolete; users.listFollowers comes from a rename
    assert result.namespace_count == 4
    assert result.method_count == 6


def test_generated_content(tmp_path: Path):
    config = make_config(tmp_path)
    run_generate(config, echo=lambda _: None)

    params = config.parameters_path.read_text(encoding="utf-8")
    methods = config.method_types_path.read_text(encoding="utf-8")

    positions = [params.index(f"  {ns}: {{") for ns in ("codeScanning", "issues", "repos", "users")]
    assert positions == sorted(positions)

    assert "legacyGet" not in params
    assert "teams" not in params
    assert 'Endpoints["POST /repos/{owner}/{repo}/releases/{release_id}/assets{?name,label}"]["response"]' in params

    assert "@deprecated octokit.rest.issues.lock() is deprecated, see https://x" in methods
    assert (
        "@deprecated octokit.rest.users.listFollowers() has been renamed to "
        "octokit.rest.users.listFollowersForAuthenticatedUser() (2021-03-04)"
    ) in methods
    assert 'from "./parameters-and-response-types.js";' in methods


def test_regeneration_is_byte_identical(tmp_path: Path):
    config = make_config(tmp_path)
    run_generate(config, echo=lambda _: None)
    first = (config.method_types_path.read_bytes(), config.parameters_path.read_bytes())

    run_generate(config, echo=lambda _: None)
    second = (config.method_types_path.read_bytes(), config.parameters_path.read_bytes())

    assert first == second


def test_generate_documents_is_deterministic():
    catalog = load_catalog(FIXTURE)
    config = GeneratorConfig()

    a = generate_documents(catalog, config)
    b = generate_documents(load_catalog(FIXTURE), config)
    assert a.method_types == b.method_types
    assert a.parameters_and_response_types == b.parameters_and_response_types


def test_custom_exclusion_predicate():
    catalog = load_catalog(FIXTURE)
    docs = generate_documents(catalog, GeneratorConfig(), is_excluded=lambda ep: ep.scope != "repos")

    assert [ns.namespace for ns in docs.namespaces] == ["repos"]


def test_missing_catalog_writes_nothing(tmp_path: Path):
    config = GeneratorConfig().resolve(tmp_path)
    with pytest.raises(CatalogError):
        run_generate(config, echo=lambda _: None)
    assert not config.output_dir.exists()


def test_format_failure_writes_nothing(tmp_path: Path, monkeypatch):
    class Broken:
        name = "broken"

        def format(self, source: str) -> str:
            raise FormatError("boom")

    monkeypatch.setattr(pipeline, "get_formatter", lambda name: Broken())
    config = make_config(tmp_path)
    lines: list[str] = []

    with pytest.raises(FormatError):
        run_generate(config, echo=lines.append)

    assert lines == []
    assert not config.method_types_path.exists()
    assert not config.parameters_path.exists()


def test_config_paths():
    config = GeneratorConfig(output_dir=Path("/out"), parameters_filename="params.ts")
    assert config.parameters_path == Path("/out/params.ts")
    assert config.method_types_path == Path("/out/method-types.ts")
    assert config.parameters_module == "./params.js"
