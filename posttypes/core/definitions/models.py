from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field


class CapabilitiesDefinition(BaseModel):
    # empty map => derive the standard capability names
    map: Dict[str, str] = Field(default_factory=dict)
    roles: List[str] = Field(default_factory=list)


class ColumnsDefinition(BaseModel):
    add: Dict[str, Optional[str]] = Field(default_factory=dict)
    hide: List[str] = Field(default_factory=list)
    order: Dict[str, int] = Field(default_factory=dict)
    sortable: Dict[str, Union[str, Tuple[str, bool]]] = Field(default_factory=dict)


class EntityDefinition(BaseModel):
    names: Union[str, Dict[str, str]]
    options: Dict[str, Any] = Field(default_factory=dict)
    labels: Dict[str, Any] = Field(default_factory=dict)
    capabilities: Optional[CapabilitiesDefinition] = None
    columns: ColumnsDefinition = Field(default_factory=ColumnsDefinition)


class PostTypeDefinition(EntityDefinition):
    taxonomies: List[str] = Field(default_factory=list)
    filters: Optional[List[str]] = None
    icon: Optional[str] = None


class TaxonomyDefinition(EntityDefinition):
    post_types: List[str] = Field(default_factory=list)


class EntityDefinitions(BaseModel):
    post_types: List[PostTypeDefinition] = Field(default_factory=list)
    taxonomies: List[TaxonomyDefinition] = Field(default_factory=list)
