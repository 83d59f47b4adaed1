"""
Entity definitions loader.

Reads post type / taxonomy declarations from a YAML or JSON file so a site can
declare its content model without writing Python:

    post_types:
      - names: book
        taxonomies: [genre]
        icon: dashicons-book-alt
        capabilities:
          roles: [editor]
        columns:
          add: {price: Price}
          sortable: {price: [price, true]}
    taxonomies:
      - names: {key: genre, plural: Genres}
        post_types: [book]

Environment variable:
    POSTTYPES_DEFINITIONS_FILE: path to the definitions file (optional).
    Default search path: <cwd>/posttypes.yaml
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from ..entities import BaseEntity, PostType, Taxonomy
from ..errors import DefinitionsError
from .models import EntityDefinition, EntityDefinitions

_log = logging.getLogger("posttypes.definitions")

DEFAULT_FILENAME = "posttypes.yaml"


def load_definitions(path: Optional[Path] = None) -> EntityDefinitions:
    """
    Load and validate entity definitions.

    A missing file yields empty definitions; an unreadable or malformed one
    raises DefinitionsError.
    """
    resolved = _resolve_path(path)
    if not resolved.exists():
        _log.warning("Definitions file %s not found; no entities declared", resolved)
        return EntityDefinitions()

    try:
        raw_text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        raise DefinitionsError(f"Cannot read definitions file {resolved}: {exc}") from exc

    # JSON first, YAML for everything else
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise DefinitionsError(f"Failed to parse {resolved} as JSON or YAML: {exc}") from exc

    if data is None:
        return EntityDefinitions()
    if not isinstance(data, dict):
        raise DefinitionsError(f"Definitions file {resolved} must be a mapping, got {type(data).__name__}")

    try:
        definitions = EntityDefinitions.model_validate(data)
    except ValidationError as exc:
        raise DefinitionsError(f"Invalid definitions in {resolved}: {exc}") from exc

    _log.info(
        "Loaded %d post types and %d taxonomies from %s",
        len(definitions.post_types),
        len(definitions.taxonomies),
        resolved,
    )
    return definitions


def _resolve_path(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv("POSTTYPES_DEFINITIONS_FILE", "").strip()
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_FILENAME


def _apply_common(entity: BaseEntity, d: EntityDefinition) -> None:
    if d.capabilities is not None:
        entity.capabilities(d.capabilities.map, d.capabilities.roles)

    columns = entity.columns()
    if d.columns.add:
        columns.add_many(d.columns.add)
    if d.columns.hide:
        columns.hide(d.columns.hide)
    if d.columns.order:
        columns.order(d.columns.order)
    if d.columns.sortable:
        columns.sortable(d.columns.sortable)


def build_entities(definitions: EntityDefinitions) -> List[BaseEntity]:
    """Instantiate configured entities: post types first, then taxonomies."""
    out: List[BaseEntity] = []

    for d in definitions.post_types:
        post_type = PostType(d.names, d.options, d.labels)
        if d.taxonomies:
            post_type.taxonomy(d.taxonomies)
        if d.filters is not None:
            post_type.filters(d.filters)
        if d.icon:
            post_type.icon(d.icon)
        _apply_common(post_type, d)
        out.append(post_type)

    for d in definitions.taxonomies:
        taxonomy = Taxonomy(d.names, d.options, d.labels)
        if d.post_types:
            taxonomy.post_type(d.post_types)
        _apply_common(taxonomy, d)
        out.append(taxonomy)

    return out
