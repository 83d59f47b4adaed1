from __future__ import annotations

from typing import Any, Dict, Iterable, List, Union

from ..host.contracts import TAXONOMY, QueryVars
from ..host.hooks import HookRegistry
from ..labels import TAXONOMY_LABELS
from .base import BaseEntity, _as_key_list


class Taxonomy(BaseEntity):
    kind = TAXONOMY
    label_templates = TAXONOMY_LABELS

    def __init__(self, names, options=None, labels=None):
        self.post_types: List[str] = []
        super().__init__(names, options, labels)

    def post_type(self, post_types: Union[str, Iterable[str]]) -> "Taxonomy":
        for post_type in _as_key_list(post_types, "post_types"):
            if post_type not in self.post_types:
                self.post_types.append(post_type)
        return self

    def default_options(self) -> Dict[str, Any]:
        return {
            "hierarchical": True,
            "show_admin_column": True,
            "rewrite": {"slug": self.slug},
        }

    def _register_hooks(self, hooks: HookRegistry) -> None:
        hooks.add_action("init", self.register_taxonomy_to_objects, accepted_args=0)

        hooks.add_filter(f"manage_edit-{self.name}_columns", self.modify_columns, 10, 1)
        hooks.add_filter(f"manage_{self.name}_custom_column", self.populate_columns, 10, 3)
        hooks.add_filter(f"manage_edit-{self.name}_sortable_columns", self.set_sortable_columns, 10, 1)
        hooks.add_action("parse_term_query", self.sort_sortable_columns, 10, 1)

    def register_taxonomy_to_objects(self) -> None:
        host = self._require_host()
        for post_type in self.post_types:
            host.associate_taxonomy(self.name, post_type)

    def populate_columns(self, content: Any, column: str, term_id: Any) -> Any:
        # term columns are filters: keep the host's content unless a renderer answers
        result = self.columns().populate(column, term_id)
        return content if result is None else result

    def sort_sortable_columns(self, query: QueryVars) -> None:
        if not self._require_host().is_admin():
            return
        taxonomies = query.get("taxonomy") or []
        if isinstance(taxonomies, str):
            taxonomies = [taxonomies]
        if self.name not in taxonomies:
            return
        self._apply_sort(query, query.get("orderby"))
