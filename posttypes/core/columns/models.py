from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from ..errors import InvalidArgumentError

PopulateFn = Callable[..., Any]

# A sortable column declares either a meta key (string sort) or a
# (meta_key, numeric) pair.
SortMeta = Union[str, Tuple[str, bool]]

STRING_ORDERBY = "meta_value"
NUMERIC_ORDERBY = "meta_value_num"


@dataclass(frozen=True)
class SortSpec:
    meta_key: str
    numeric: bool = False
    pair: bool = False

    @classmethod
    def from_meta(cls, meta: Any) -> "SortSpec":
        if isinstance(meta, str):
            return cls(meta_key=meta)
        if isinstance(meta, (list, tuple)) and meta and isinstance(meta[0], str):
            numeric = bool(meta[1]) if len(meta) > 1 else False
            return cls(meta_key=meta[0], numeric=numeric, pair=True)
        raise InvalidArgumentError(f"sortable meta must be a string or (meta_key, numeric) pair, got {meta!r}")

    def as_meta(self) -> SortMeta:
        return (self.meta_key, self.numeric) if self.pair else self.meta_key


@dataclass(frozen=True)
class SortOrder:
    meta_key: str
    orderby: str


@dataclass
class ColumnDefinition:
    id: str
    label: Optional[str] = None  # None => not added, only behaviour attached
    populate: Optional[PopulateFn] = None
    sortable: Optional[SortSpec] = None
