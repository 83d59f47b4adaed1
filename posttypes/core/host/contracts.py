from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

POST_TYPE = "post_type"
TAXONOMY = "taxonomy"


@dataclass(frozen=True)
class TaxonomyInfo:
    """What the admin filter dropdown needs to know about a host taxonomy."""

    name: str
    all_items: str
    filter_by_item: str
    hierarchical: bool = True


class QueryVars(Protocol):
    def get(self, name: str, default: Any = None) -> Any:
        ...

    def set(self, name: str, value: Any) -> None:
        ...


class HostPlatform(Protocol):
    """
    Minimal contract the content-management host must satisfy.

    ``kind`` is either ``"post_type"`` or ``"taxonomy"``.
    """

    def entity_exists(self, kind: str, key: str) -> bool:
        ...

    def register_entity(self, kind: str, key: str, config: Dict[str, Any]) -> None:
        ...

    def role_exists(self, role: str) -> bool:
        ...

    def grant_capability(self, role: str, capability: str) -> None:
        ...

    def associate_taxonomy(self, taxonomy_key: str, entity_key: str) -> None:
        ...

    def is_object_in_taxonomy(self, entity_key: str, taxonomy_key: str) -> bool:
        ...

    def get_taxonomy(self, key: str) -> Optional[TaxonomyInfo]:
        ...

    def render_filter_dropdown(self, label: str, args: Dict[str, Any]) -> None:
        ...

    def flush_rewrite_rules(self, hard: bool = True) -> None:
        ...

    def is_admin(self) -> bool:
        ...

    def request_params(self) -> Mapping[str, Any]:
        """Query parameters of the current admin list request."""
        ...
