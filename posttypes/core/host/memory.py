from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from .contracts import TAXONOMY, TaxonomyInfo

_log = logging.getLogger("posttypes.host")


@dataclass
class InMemoryQuery:
    """Query-vars holder standing in for the host's query object."""

    vars: Dict[str, Any] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.vars.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.vars[name] = value


class InMemoryHost:
    """
    Reference host used by the renderer and the test-suite.

    Keeps registered entities, role capabilities and taxonomy attachments in
    plain dicts so callers can inspect the outcome of a registration cycle.
    """

    def __init__(
        self,
        *,
        roles: Iterable[str] = ("administrator", "editor", "author"),
        existing: Optional[Dict[Tuple[str, str], Dict[str, Any]]] = None,
        admin: bool = True,
        request: Optional[Dict[str, Any]] = None,
    ):
        self.entities: Dict[Tuple[str, str], Dict[str, Any]] = dict(existing or {})
        self.roles: Dict[str, Set[str]] = {r: set() for r in roles}
        self.attachments: Dict[str, List[str]] = {}
        self.dropdowns: List[Tuple[str, Dict[str, Any]]] = []
        self.flushes: List[bool] = []
        self.admin = admin
        self.request: Dict[str, Any] = dict(request or {})

    # --- registration ---

    def entity_exists(self, kind: str, key: str) -> bool:
        return (kind, key) in self.entities

    def register_entity(self, kind: str, key: str, config: Dict[str, Any]) -> None:
        _log.info("host.register kind=%s key=%s", kind, key)
        self.entities[(kind, key)] = dict(config)

    def args(self, kind: str, key: str) -> Optional[Dict[str, Any]]:
        return self.entities.get((kind, key))

    # --- roles ---

    def role_exists(self, role: str) -> bool:
        return role in self.roles

    def grant_capability(self, role: str, capability: str) -> None:
        self.roles[role].add(capability)

    # --- taxonomies ---

    def associate_taxonomy(self, taxonomy_key: str, entity_key: str) -> None:
        attached = self.attachments.setdefault(taxonomy_key, [])
        if entity_key not in attached:
            attached.append(entity_key)

    def is_object_in_taxonomy(self, entity_key: str, taxonomy_key: str) -> bool:
        return entity_key in self.attachments.get(taxonomy_key, [])

    def get_taxonomy(self, key: str) -> Optional[TaxonomyInfo]:
        args = self.entities.get((TAXONOMY, key))
        if args is None:
            return None
        labels = args.get("labels") or {}
        plural = labels.get("name", key)
        return TaxonomyInfo(
            name=key,
            all_items=labels.get("all_items", f"All {plural}"),
            filter_by_item=labels.get("filter_by_item", f"Filter by {plural}"),
            hierarchical=bool(args.get("hierarchical", False)),
        )

    # --- admin ---

    def render_filter_dropdown(self, label: str, args: Dict[str, Any]) -> None:
        self.dropdowns.append((label, dict(args)))

    def flush_rewrite_rules(self, hard: bool = True) -> None:
        self.flushes.append(hard)

    def is_admin(self) -> bool:
        return self.admin

    def request_params(self) -> Dict[str, Any]:
        return dict(self.request)

