from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EndpointRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    scope: str
    id: str


class RenameInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    before: EndpointRef
    after: EndpointRef
    date: str


class EndpointDescriptor(BaseModel):
    """
    One record of the endpoint catalog.

    JSON keys follow the catalog (camelCase); attributes are snake_case.
    Keys the generator does not use (parameters, responses, ...) are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    scope: str
    id: str
    method: str
    url: str
    description: Optional[str] = None
    previews: tuple[str, ...] = ()

    # legacy marker: endpoint is gone and must not be generated
    deprecated: Optional[Union[bool, str]] = None
    is_deprecated: bool = Field(False, alias="isDeprecated")
    documentation_url: Optional[str] = Field(None, alias="documentationUrl")
    removal_date: Optional[str] = Field(None, alias="removalDate")

    renamed: Optional[RenameInfo] = None

    @field_validator("previews", mode="before")
    @classmethod
    def _preview_names(cls, value: Any) -> Any:
        # catalog previews are either plain names or {"name": ...} objects
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            return value

        names = []
        for p in value:
            if isinstance(p, dict):
                if "name" not in p:
                    raise ValueError("preview object without 'name'")
                p = p["name"]
            names.append(p)
        return tuple(names)


Catalog = tuple[EndpointDescriptor, ...]
