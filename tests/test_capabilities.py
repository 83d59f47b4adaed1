from posttypes.core.capabilities import CapabilitySet, build_capabilities, grant_capabilities
from posttypes.core.host import TAXONOMY, InMemoryHost
from posttypes.core.naming import derive_names


def test_post_type_defaults():
    caps = build_capabilities(derive_names("book"))
    assert caps.capabilities == {
        "edit_post": "edit_book",
        "read_post": "read_book",
        "delete_post": "delete_book",
        "edit_posts": "edit_books",
        "edit_others_posts": "edit_others_books",
        "publish_posts": "publish_books",
        "read_private_posts": "read_private_books",
        "create_posts": "edit_books",
    }
    assert caps.roles == ()


def test_singular_is_lowercased():
    caps = build_capabilities(derive_names({"key": "book", "singular": "Novel"}))
    assert caps.capabilities["edit_post"] == "edit_novel"


def test_taxonomy_defaults():
    caps = build_capabilities(derive_names("genre"), kind=TAXONOMY)
    assert caps.capabilities == {
        "manage_terms": "manage_genres",
        "edit_terms": "edit_genres",
        "delete_terms": "delete_genres",
        "assign_terms": "assign_genres",
    }


def test_explicit_map_used_verbatim_and_roles_recorded():
    explicit = {"edit_post": "edit_book123"}
    caps = build_capabilities(derive_names("book"), explicit, ["editor", "editor", "author"])
    assert caps.capabilities == explicit
    assert caps.roles == ("editor", "author")


def test_empty_set_is_falsy():
    assert not CapabilitySet()


def test_grant_skips_unknown_roles_and_is_additive():
    host = InMemoryHost(roles=("editor",))
    host.roles["editor"].add("moderate_comments")

    caps = build_capabilities(derive_names("book"), None, ["editor", "ghost"])
    granted = grant_capabilities(caps, host)

    # 7 distinct names: create_posts shares edit_books
    assert granted == 7
    assert "ghost" not in host.roles
    assert "moderate_comments" in host.roles["editor"]
    assert {"edit_book", "edit_books", "read_private_books"} <= host.roles["editor"]
