from __future__ import annotations

import logging
from typing import Iterable

from restgen.domain.models import EndpointDescriptor
from restgen.routes.model import RouteEntry, RouteTable

logger = logging.getLogger(__name__)

_ORIGIN_PREFIX = ":origin"


def _normalize_url(url: str) -> str:
    url = url.lower()
    # "Upload a release asset" is served from a different origin
    if url.startswith(_ORIGIN_PREFIX):
        url = url[len(_ORIGIN_PREFIX):]
    return url


def _method_path(prefix: str, scope: str, method_id: str) -> str:
    return f"{prefix}.{scope}.{method_id}()"


def _sorted_table(table: RouteTable) -> RouteTable:
    return {
        scope: {mid: table[scope][mid] for mid in sorted(table[scope])}
        for scope in sorted(table)
    }


def build_route_table(
    endpoints: Iterable[EndpointDescriptor],
    identifier_prefix: str = "octokit.rest",
) -> RouteTable:
    """
    Fold endpoint descriptors into scope -> method id -> RouteEntry.

    Later descriptors for the same (scope, id) replace method/url/description/
    previews but keep a deprecation note recorded earlier.

    A renamed endpoint keeps its old name alive: if nothing sits at the old
    key yet, the new entry itself is placed there (shared, not copied), and
    the old key is annotated as deprecated. While shared, every note written
    through either key shows up on both. A later descriptor for the new key
    replaces its entry and so unlinks the old key, which keeps the earlier
    entry and its note.

    Output is sorted by key at both levels (stable for diffs).
    """
    table: RouteTable = {}

    for ep in endpoints:
        scope_routes = table.setdefault(ep.scope, {})

        previous = scope_routes.get(ep.id)
        entry = RouteEntry(
            method=ep.method,
            url=_normalize_url(ep.url),
            description=ep.description,
            has_required_previews=len(ep.previews) > 0,
            deprecated=previous.deprecated if previous else None,
        )
        scope_routes[ep.id] = entry

        if ep.renamed is not None:
            before, after = ep.renamed.before, ep.renamed.after
            before_routes = table.setdefault(before.scope, {})
            if before.id not in before_routes:
                before_routes[before.id] = entry

            before_routes[before.id].deprecated = (
                f"{_method_path(identifier_prefix, before.scope, before.id)} has been renamed to "
                f"{_method_path(identifier_prefix, after.scope, after.id)} ({ep.renamed.date})"
            )

        # applied last: wins over a rename note on the same entry
        if ep.is_deprecated:
            scope_routes[ep.id].deprecated = (
                f"{_method_path(identifier_prefix, ep.scope, ep.id)} is deprecated, "
                f"see {ep.documentation_url}"
            )

    logger.debug(
        "Route table: %d scopes, %d methods",
        len(table),
        sum(len(v) for v in table.values()),
    )
    return _sorted_table(table)
