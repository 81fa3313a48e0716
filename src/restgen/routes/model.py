from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class RouteEntry:
    method: str
    url: str
    description: Optional[str]
    has_required_previews: bool
    deprecated: Optional[str] = None

    @property
    def route(self) -> str:
        return f"{self.method} {self.url}"


# scope -> method id -> entry
RouteTable = dict[str, dict[str, RouteEntry]]
