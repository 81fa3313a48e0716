from __future__ import annotations

from restgen.domain.models import EndpointDescriptor


def is_obsolete(endpoint: EndpointDescriptor) -> bool:
    """
    True if the endpoint must be left out of the generated types entirely.

    Endpoints flagged with isDeprecated are NOT obsolete: they are still
    generated, with a @deprecated note.
    """
    if endpoint.removal_date:
        return True
    return bool(endpoint.deprecated)
