import pytest

from posttypes.core.host import HookRegistry, InMemoryHost


@pytest.fixture()
def host():
    return InMemoryHost(roles=("administrator", "editor"))


@pytest.fixture()
def hooks():
    return HookRegistry()


@pytest.fixture()
def definitions_file(tmp_path):
    """
    Writes a small YAML definitions file and returns its path.
    """
    path = tmp_path / "posttypes.yaml"
    path.write_text(
        "\n".join([
            "post_types:",
            "  - names: book",
            "    taxonomies: [genre]",
            "    icon: dashicons-book-alt",
            "    capabilities:",
            "      roles: [editor, ghost]",
            "    columns:",
            "      add: {price: Price}",
            "      sortable: {price: [price, true]}",
            "taxonomies:",
            "  - names: {key: genre, plural: Genres}",
            "    post_types: [book]",
            "",
        ]),
        encoding="utf-8",
    )
    return path
