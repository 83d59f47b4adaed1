import pytest
from pydantic import ValidationError

from posttypes.core.errors import InvalidArgumentError, MissingFieldError
from posttypes.core.naming import NameSet, derive_names, humanize, pluralize, sanitize_title, slugify


def test_bare_identifier_derives_all_names():
    names = derive_names("book")
    assert names == NameSet(key="book", singular="Book", plural="Books", slug="books")


def test_trailing_y_pluralizes_to_ies():
    names = derive_names("story")
    assert names.plural == "Stories"
    assert names.slug == "stories"


def test_separators_become_words_and_dashes():
    names = derive_names("film_genre")
    assert names.singular == "Film Genre"
    assert names.plural == "Film Genres"
    assert names.slug == "film-genres"

    names = derive_names("Case-Study")
    assert names.singular == "Case Study"
    assert names.plural == "Case Studies"
    assert names.slug == "case-studies"


@pytest.mark.parametrize("identifier", ["book", "Film Genre", "news_item", "CASE-study", "my  odd__key"])
def test_derived_slug_is_lowercase_without_spaces_or_underscores(identifier):
    slug = derive_names(identifier).slug
    assert slug == slug.lower()
    assert " " not in slug
    assert "_" not in slug


def test_explicit_names_are_used_verbatim():
    names = derive_names({
        "name": "book",
        "singular": "Single Book",
        "plural": "Multiple Books",
        "slug": "slug_books",
    })
    assert names.key == "book"
    assert names.singular == "Single Book"
    assert names.plural == "Multiple Books"
    assert names.slug == "slug_books"


def test_partial_mapping_only_computes_missing_fields():
    names = derive_names({"key": "genre", "plural": "Kinds", "slug": ""})
    assert names.singular == "Genre"
    assert names.plural == "Kinds"
    # empty counts as missing
    assert names.slug == "genres"


def test_plural_derives_from_key_not_explicit_singular():
    names = derive_names({"key": "book", "singular": "Novel"})
    assert names.singular == "Novel"
    assert names.plural == "Books"


def test_derivation_is_deterministic():
    assert derive_names("story") == derive_names("story")


def test_name_set_passes_through():
    ns = NameSet(key="k", singular="S", plural="P", slug="p")
    assert derive_names(ns) is ns


def test_name_set_is_frozen():
    ns = derive_names("book")
    with pytest.raises(Exception):
        ns.slug = "other"


@pytest.mark.parametrize("bad", [None, 42, ["book"], ""])
def test_malformed_identifier_fails_fast(bad):
    with pytest.raises(InvalidArgumentError):
        derive_names(bad)


def test_mapping_without_key_is_missing_field():
    with pytest.raises(MissingFieldError) as exc:
        derive_names({"singular": "Book"})
    assert "key" in str(exc.value)


def test_name_set_requires_non_empty_key():
    with pytest.raises(ValidationError):
        NameSet(key="", singular="Book", plural="Books", slug="books")


@pytest.mark.parametrize("value", [["Novels"], 5])
def test_non_string_explicit_name_is_rejected(value):
    with pytest.raises(InvalidArgumentError) as exc:
        derive_names({"key": "book", "plural": value})
    assert "plural" in str(exc.value)


def test_helpers():
    assert pluralize("Category") == "Categories"
    assert pluralize("Book") == "Books"
    assert humanize("news-item") == "News Item"
    assert slugify("News Item") == "news-item"
    assert sanitize_title("  Sci Fi! ") == "sci-fi"
