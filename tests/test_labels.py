from posttypes.core.labels import POST_TYPE_LABELS, TAXONOMY_LABELS, build_labels
from posttypes.core.naming import derive_names


def test_default_post_type_labels():
    labels = build_labels(derive_names("book"))
    assert labels == {
        "name": "Books",
        "singular_name": "Book",
        "menu_name": "Books",
        "all_items": "Books",
        "add_new": "Add New",
        "add_new_item": "Add New Book",
        "edit_item": "Edit Book",
        "new_item": "New Book",
        "view_item": "View Book",
        "search_items": "Search Books",
        "not_found": "No Books found",
        "not_found_in_trash": "No Books found in Trash",
        "parent_item_colon": "Parent Book:",
    }


def test_override_replaces_only_given_key():
    names = derive_names("book")
    defaults = build_labels(names)
    labels = build_labels(names, {"add_new": "Add New Book"})

    assert labels["add_new"] == "Add New Book"
    assert len(labels) == 13
    for key, value in defaults.items():
        if key != "add_new":
            assert labels[key] == value


def test_extra_override_keys_are_kept():
    labels = build_labels(derive_names("book"), {"filter_by_item": "Filter books"})
    assert labels["filter_by_item"] == "Filter books"


def test_taxonomy_templates_extend_the_base_keys():
    assert set(POST_TYPE_LABELS) <= set(TAXONOMY_LABELS)

    labels = build_labels(derive_names("genre"), templates=TAXONOMY_LABELS)
    assert labels["all_items"] == "All Genres"
    assert labels["new_item_name"] == "New Genre Name"
    assert labels["separate_items_with_commas"] == "Separate Genres with commas"
