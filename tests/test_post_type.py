import pytest

from posttypes import PostType
from posttypes.core.columns import ColumnRegistry
from posttypes.core.entities import RegistrationState
from posttypes.core.errors import InvalidArgumentError, MissingFieldError


@pytest.fixture()
def books():
    return PostType("book")


def test_names_on_instantiation(books):
    assert books.raw_names == "book"
    assert books.name == "book"
    assert books.singular == "Book"
    assert books.plural == "Books"
    assert books.slug == "books"


def test_passed_names_are_used():
    names = {"name": "book", "singular": "Single Book", "plural": "Multiple Books", "slug": "slug_books"}
    books = PostType(names)
    assert books.raw_names == names
    assert (books.singular, books.plural, books.slug) == ("Single Book", "Multiple Books", "slug_books")


def test_names_can_be_replaced(books):
    books.names({"key": "book", "slug": "library"})
    assert books.slug == "library"


def test_defaults_on_instantiation(books):
    assert books.custom_options == {}
    assert books.custom_labels == {}
    assert books.taxonomies == []
    assert books.custom_filters is None
    assert books.menu_icon is None
    assert not books.capability_set
    assert isinstance(books.columns(), ColumnRegistry)
    assert books.state == RegistrationState.PENDING


def test_taxonomies_accumulate_without_duplicates(books):
    books.taxonomy("genre").taxonomy(["genre", "publisher"])
    assert books.taxonomies == ["genre", "publisher"]


def test_default_config(books):
    assert books.build_config() == {
        "public": True,
        "labels": books.create_labels(),
        "rewrite": {"slug": "books"},
    }


def test_config_scenario_for_bare_identifier(books):
    config = books.build_config()
    assert config["rewrite"]["slug"] == "books"
    assert config["labels"]["singular_name"] == "Book"


def test_build_config_is_idempotent():
    books = PostType("book", {"supports": ["title"]}, {"add_new": "Add New Book"})
    books.icon("dashicons-book-alt").capabilities()
    assert books.build_config() == books.build_config()


def test_custom_options_merge_over_defaults():
    books = PostType("book", {"public": False, "rewrite": {"with_front": False}})
    config = books.build_config()
    assert config["public"] is False
    assert config["rewrite"] == {"slug": "books", "with_front": False}


def test_caller_labels_option_skips_generated_labels():
    books = PostType("book", {"labels": {"name": "Library"}})
    assert books.build_config()["labels"] == {"name": "Library"}


def test_label_overrides_flow_into_config():
    books = PostType("book", labels={"add_new": "Add New Book"})
    labels = books.build_config()["labels"]
    assert labels["add_new"] == "Add New Book"
    assert labels["edit_item"] == "Edit Book"


def test_icon_injected_unless_option_given(books):
    books.icon("dashicons-book-alt")
    assert books.build_config()["menu_icon"] == "dashicons-book-alt"

    books.options({"menu_icon": "dashicons-admin-post"})
    assert books.build_config()["menu_icon"] == "dashicons-admin-post"


def test_capabilities_injected(books):
    books.capabilities()
    caps = books.build_config()["capabilities"]
    assert caps["edit_posts"] == "edit_books"
    assert caps["edit_post"] == "edit_book"

    custom = {"edit_post": "edit_book123", "edit_posts": "edit_books123"}
    books.capabilities(custom, ["editor"])
    assert books.build_config()["capabilities"] == custom
    assert books.capability_set.roles == ("editor",)


def test_filters_empty_without_taxonomies(books):
    assert books.get_filters() == []


def test_filters_default_to_taxonomies(books):
    books.taxonomy("genre")
    assert books.get_filters() == ["genre"]


def test_explicit_filters_win(books):
    books.filters(["genre", "published"]).taxonomy("genre")
    assert books.get_filters() == ["genre", "published"]


def test_explicit_empty_filters_do_not_fall_back(books):
    books.filters([]).taxonomy("genre")
    assert books.get_filters() == []


def test_bad_arguments_fail_fast():
    with pytest.raises(InvalidArgumentError):
        PostType(123)
    with pytest.raises(InvalidArgumentError):
        PostType("book", options=["public"])
    with pytest.raises(MissingFieldError):
        PostType({"plural": "Books"})
    with pytest.raises(InvalidArgumentError):
        PostType("book").taxonomy(5)
