from __future__ import annotations

from typing import Iterable

from restgen.namespaces.projector import Namespace

PARAMETERS_TYPE_NAME = "RestEndpointMethodTypes"
METHODS_TYPE_NAME = "RestEndpointMethods"


def _object_type(members: list[str]) -> str:
    if not members:
        return "{}"
    return "{\n" + "\n".join(members) + "\n}"


def render_parameters_and_response_types(
    namespaces: Iterable[Namespace],
    types_package: str = "@octokit/types",
) -> str:
    """namespace -> method -> {parameters, response}, looked up by route in Endpoints."""
    ns_members: list[str] = []
    for ns in namespaces:
        members = []
        for m in ns.methods:
            members.append(
                f"{m.name}: {{\n"
                f'parameters: RequestParameters & Endpoints["{m.route}"]["parameters"],\n'
                f'response: Endpoints["{m.route}"]["response"]\n'
                f"}}"
            )
        ns_members.append(f"{ns.namespace}: {_object_type(members)}")

    lines = [
        f'import type {{ Endpoints, RequestParameters }} from "{types_package}";',
        "",
        f"export type {PARAMETERS_TYPE_NAME} = {_object_type(ns_members)}",
    ]
    return "\n".join(lines)


def render_method_types(
    namespaces: Iterable[Namespace],
    types_package: str = "@octokit/types",
    parameters_module: str = "./parameters-and-response-types.js",
) -> str:
    """namespace -> method -> callable signature with defaults/endpoint metadata."""
    ns_members: list[str] = []
    for ns in namespaces:
        members = []
        for m in ns.methods:
            ref = f'{PARAMETERS_TYPE_NAME}["{ns.namespace}"]["{m.name}"]'
            members.append(
                f"{m.jsdoc}\n"
                f"{m.name}: {{\n"
                f'(params?: {ref}["parameters"]): Promise<{ref}["response"]>\n'
                f'defaults: RequestInterface["defaults"];\n'
                f"endpoint: EndpointInterface<{{ url: string }}>;\n"
                f"}}"
            )
        ns_members.append(f"{ns.namespace}: {_object_type(members)}")

    lines = [
        f'import type {{ EndpointInterface, RequestInterface }} from "{types_package}";',
        f'import type {{ {PARAMETERS_TYPE_NAME} }} from "{parameters_module}";',
        "",
        f"export type {METHODS_TYPE_NAME} = {_object_type(ns_members)}",
    ]
    return "\n".join(lines)
