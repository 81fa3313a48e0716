from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from restgen.catalog.deprecation import is_obsolete
from restgen.catalog.loader import load_catalog
from restgen.config import GeneratorConfig
from restgen.domain.models import Catalog, EndpointDescriptor
from restgen.emit.formatter import get_formatter
from restgen.emit.typescript import render_method_types, render_parameters_and_response_types
from restgen.errors import OutputWriteError
from restgen.namespaces.projector import Namespace, project_namespaces
from restgen.routes.builder import build_route_table
from restgen.routes.model import RouteTable

logger = logging.getLogger(__name__)

ExclusionPredicate = Callable[[EndpointDescriptor], bool]


@dataclass(frozen=True)
class GeneratedDocuments:
    method_types: str
    parameters_and_response_types: str
    namespaces: list[Namespace]


@dataclass(frozen=True)
class GenerateResult:
    method_types_path: str
    parameters_path: str
    namespace_count: int
    method_count: int


def build_routes(
    catalog: Catalog,
    identifier_prefix: str = "octokit.rest",
    is_excluded: ExclusionPredicate = is_obsolete,
) -> RouteTable:
    kept = [ep for ep in catalog if not is_excluded(ep)]
    logger.debug("Excluded %d obsolete endpoints", len(catalog) - len(kept))
    return build_route_table(kept, identifier_prefix=identifier_prefix)


def generate_documents(
    catalog: Catalog,
    config: GeneratorConfig,
    is_excluded: ExclusionPredicate = is_obsolete,
) -> GeneratedDocuments:
    """
    Catalog -> both formatted documents, no IO.
    Both documents are formatted before either is returned, so a formatter
    failure never leaves a half-written pair behind.
    """
    table = build_routes(catalog, config.identifier_prefix, is_excluded)
    namespaces = project_namespaces(table)

    formatter = get_formatter(config.formatter)
    method_types = formatter.format(
        render_method_types(
            namespaces,
            types_package=config.types_package,
            parameters_module=config.parameters_module,
        )
    )
    parameters = formatter.format(
        render_parameters_and_response_types(namespaces, types_package=config.types_package)
    )

    return GeneratedDocuments(
        method_types=method_types,
        parameters_and_response_types=parameters,
        namespaces=namespaces,
    )


def _write(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {path}: {e}") from e


def run_generate(
    config: GeneratorConfig,
    echo: Callable[[str], None] = print,
    is_excluded: ExclusionPredicate = is_obsolete,
) -> GenerateResult:
    """
    Load, generate, write. Paths in config are used as given; call
    config.resolve() first to anchor relative paths.

    The two writes are not transactional: if the second fails, the first
    file has already been replaced.
    """
    catalog = load_catalog(config.catalog_path)
    docs = generate_documents(catalog, config, is_excluded=is_excluded)

    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Cannot create output directory {config.output_dir}: {e}") from e

    _write(config.method_types_path, docs.method_types)
    echo(f"Types written to {config.method_types_path}")

    _write(config.parameters_path, docs.parameters_and_response_types)
    echo(f"Types written to {config.parameters_path}")

    return GenerateResult(
        method_types_path=str(config.method_types_path),
        parameters_path=str(config.parameters_path),
        namespace_count=len(docs.namespaces),
        method_count=sum(len(ns.methods) for ns in docs.namespaces),
    )
