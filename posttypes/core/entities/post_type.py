from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..host.contracts import POST_TYPE, QueryVars
from ..host.hooks import HookRegistry
from ..labels import POST_TYPE_LABELS
from ..naming import sanitize_title
from .base import BaseEntity, _as_key_list

_log = logging.getLogger("posttypes.entities.post_type")


class PostType(BaseEntity):
    """
    Custom post type builder.

        books = PostType("book").taxonomy("genre").icon("dashicons-book-alt")
        books.columns().add("price", "Price").sortable_by("price", ("price", True))
        books.register(hooks, host)
    """

    kind = POST_TYPE
    label_templates = POST_TYPE_LABELS

    def __init__(self, names, options=None, labels=None):
        self.taxonomies: List[str] = []
        # None => not set; an explicit [] means "no filters"
        self.custom_filters: Optional[List[str]] = None
        self.menu_icon: Optional[str] = None
        super().__init__(names, options, labels)

    def taxonomy(self, taxonomies: Union[str, Iterable[str]]) -> "PostType":
        for taxonomy in _as_key_list(taxonomies, "taxonomies"):
            if taxonomy not in self.taxonomies:
                self.taxonomies.append(taxonomy)
        return self

    def filters(self, filters: Optional[Iterable[str]]) -> "PostType":
        if filters is None:
            self.custom_filters = None
        else:
            self.custom_filters = _as_key_list(filters, "filters") if filters else []
        return self

    def icon(self, icon: Optional[str]) -> "PostType":
        self.menu_icon = icon
        return self

    def default_options(self) -> Dict[str, Any]:
        return {
            "public": True,
            "rewrite": {"slug": self.slug},
        }

    def _inject(self, options: Dict[str, Any]) -> None:
        if "menu_icon" not in options and self.menu_icon:
            options["menu_icon"] = self.menu_icon

    def get_filters(self) -> List[str]:
        if self.custom_filters is not None:
            return list(self.custom_filters)
        if self.taxonomies:
            return list(self.taxonomies)
        return []

    # --- host glue ---

    def _register_hooks(self, hooks: HookRegistry) -> None:
        hooks.add_action("init", self.register_taxonomies, accepted_args=0)
        hooks.add_action("restrict_manage_posts", self.modify_filters, accepted_args=2)

        hooks.add_filter(f"manage_{self.name}_posts_columns", self.modify_columns, 10, 1)
        hooks.add_action(f"manage_{self.name}_posts_custom_column", self.populate_columns, 10, 2)
        hooks.add_filter(f"manage_edit-{self.name}_sortable_columns", self.set_sortable_columns, 10, 1)
        hooks.add_action("pre_get_posts", self.sort_sortable_columns, 10, 1)

    def register_taxonomies(self) -> None:
        host = self._require_host()
        for taxonomy in self.taxonomies:
            host.associate_taxonomy(taxonomy, self.name)

    def filter_dropdowns(self, request_params: Optional[Mapping[str, Any]] = None) -> List[Tuple[str, Dict[str, Any]]]:
        """Return (screen reader label, dropdown args) for every usable filter."""
        host = self._require_host()
        params = host.request_params() if request_params is None else request_params
        out: List[Tuple[str, Dict[str, Any]]] = []

        for taxonomy in self.get_filters():
            info = host.get_taxonomy(taxonomy)
            if info is None:
                _log.debug("filters.skip missing taxonomy=%s", taxonomy)
                continue
            if not host.is_object_in_taxonomy(self.name, taxonomy):
                _log.debug("filters.skip unattached taxonomy=%s post_type=%s", taxonomy, self.name)
                continue

            selected = sanitize_title(params[taxonomy]) if params.get(taxonomy) else None

            out.append((info.filter_by_item, {
                "name": taxonomy,
                "value_field": "slug",
                "taxonomy": info.name,
                "show_option_all": info.all_items,
                "hierarchical": info.hierarchical,
                "selected": selected,
                "orderby": "name",
                "hide_empty": 0,
                "show_count": 0,
            }))

        return out

    def modify_filters(self, post_type: str, which: Optional[str] = None) -> None:
        # which is the toolbar position ("top" / "bottom"); dropdowns render the same in both
        if post_type != self.name:
            return
        host = self._require_host()
        for label, args in self.filter_dropdowns():
            host.render_filter_dropdown(label, args)

    def populate_columns(self, column: str, post_id: Any) -> None:
        self.columns().populate(column, post_id)

    def sort_sortable_columns(self, query: QueryVars) -> None:
        if not self._require_host().is_admin() or query.get("post_type") != self.name:
            return
        self._apply_sort(query, query.get("orderby"))
