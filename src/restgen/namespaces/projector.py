from __future__ import annotations

from dataclasses import dataclass

from restgen.routes.model import RouteEntry, RouteTable
from restgen.text.casing import camelcase
from restgen.text.jsdoc import to_jsdoc_comment


@dataclass(frozen=True)
class NamespaceMethod:
    name: str
    route: str                  # "GET /repos/{owner}/{repo}", key into Endpoints
    has_required_previews: bool
    jsdoc: str


@dataclass(frozen=True)
class Namespace:
    namespace: str              # camel-cased scope
    methods: tuple[NamespaceMethod, ...]


def _method_doc(entry: RouteEntry) -> str:
    parts = [
        entry.description,
        f"@deprecated {entry.deprecated}" if entry.deprecated else None,
    ]
    return "\n".join(p for p in parts if p)


def project_namespaces(table: RouteTable) -> list[Namespace]:
    """
    RouteTable -> ordered namespaces. No IO.
    Iterates keys in sorted order regardless of table insertion order.
    """
    namespaces: list[Namespace] = []

    for scope in sorted(table):
        routes = table[scope]
        methods = tuple(
            NamespaceMethod(
                name=method_id,
                route=routes[method_id].route,
                has_required_previews=routes[method_id].has_required_previews,
                jsdoc=to_jsdoc_comment(_method_doc(routes[method_id])),
            )
            for method_id in sorted(routes)
        )
        namespaces.append(Namespace(namespace=camelcase(scope), methods=methods))

    return namespaces
