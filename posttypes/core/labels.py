from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .merge import merge_options
from .naming import NameSet

# Templates are formatted with the entity's singular / plural names.
POST_TYPE_LABELS: Dict[str, str] = {
    "name": "{plural}",
    "singular_name": "{singular}",
    "menu_name": "{plural}",
    "all_items": "{plural}",
    "add_new": "Add New",
    "add_new_item": "Add New {singular}",
    "edit_item": "Edit {singular}",
    "new_item": "New {singular}",
    "view_item": "View {singular}",
    "search_items": "Search {plural}",
    "not_found": "No {plural} found",
    "not_found_in_trash": "No {plural} found in Trash",
    "parent_item_colon": "Parent {singular}:",
}

TAXONOMY_LABELS: Dict[str, str] = {
    **POST_TYPE_LABELS,
    "all_items": "All {plural}",
    "parent_item_colon": "Parent {plural}:",
    "update_item": "Update {singular}",
    "new_item_name": "New {singular} Name",
    "parent_item": "Parent {plural}",
    "popular_items": "Popular {plural}",
    "separate_items_with_commas": "Separate {plural} with commas",
    "add_or_remove_items": "Add or remove {plural}",
    "choose_from_most_used": "Choose from most used {plural}",
}


def build_labels(
    names: NameSet,
    overrides: Optional[Mapping[str, Any]] = None,
    templates: Mapping[str, str] = POST_TYPE_LABELS,
) -> Dict[str, Any]:
    defaults = {
        key: template.format(singular=names.singular, plural=names.plural)
        for key, template in templates.items()
    }
    return merge_options(defaults, overrides or {})
