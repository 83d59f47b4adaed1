from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..naming import humanize
from .models import (
    NUMERIC_ORDERBY,
    STRING_ORDERBY,
    ColumnDefinition,
    PopulateFn,
    SortMeta,
    SortOrder,
    SortSpec,
)

_log = logging.getLogger("posttypes.columns")


class ColumnRegistry:
    """
    Admin list-view columns for one entity.

    Modification order applied to the host's base columns:
      1) a full replacement set via ``set()`` (short-circuits everything else)
      2) added columns, appended or relabelled in declaration order
      3) hidden columns removed
      4) positions applied in declaration order
    """

    def __init__(self):
        self._definitions: Dict[str, ColumnDefinition] = {}
        self._hidden: List[str] = []
        self._positions: Dict[str, int] = {}
        self._replacement: Optional[Dict[str, str]] = None

    # --- declaration ---

    def _definition(self, column_id: str) -> ColumnDefinition:
        if column_id not in self._definitions:
            self._definitions[column_id] = ColumnDefinition(id=column_id)
        return self._definitions[column_id]

    def add(self, column_id: str, label: Optional[str] = None, populate: Optional[PopulateFn] = None) -> "ColumnRegistry":
        d = self._definition(column_id)
        d.label = label if label is not None else humanize(column_id)
        if populate is not None:
            d.populate = populate
        return self

    def add_many(self, columns: Union[Mapping[str, Optional[str]], Iterable[str]]) -> "ColumnRegistry":
        items = columns.items() if isinstance(columns, Mapping) else ((c, None) for c in columns)
        for column_id, label in items:
            self.add(column_id, label)
        return self

    def hide(self, columns: Union[str, Iterable[str]]) -> "ColumnRegistry":
        for column_id in [columns] if isinstance(columns, str) else columns:
            if column_id not in self._hidden:
                self._hidden.append(column_id)
        return self

    def order(self, positions: Mapping[str, int]) -> "ColumnRegistry":
        for column_id, position in positions.items():
            self._positions[column_id] = int(position)
        return self

    def set(self, columns: Mapping[str, str]) -> "ColumnRegistry":
        self._replacement = dict(columns)
        return self

    def on_populate(self, column_id: str, fn: PopulateFn) -> "ColumnRegistry":
        self._definition(column_id).populate = fn
        return self

    def sortable_by(self, column_id: str, meta: SortMeta) -> "ColumnRegistry":
        self._definition(column_id).sortable = SortSpec.from_meta(meta)
        return self

    def sortable(self, columns: Mapping[str, SortMeta]) -> "ColumnRegistry":
        for column_id, meta in columns.items():
            self.sortable_by(column_id, meta)
        return self

    # --- inspection ---

    @property
    def items(self) -> List[ColumnDefinition]:
        return [d for d in self._definitions.values() if d.label is not None]

    def get(self, column_id: str) -> Optional[ColumnDefinition]:
        return self._definitions.get(column_id)

    def callback_for(self, column_id: str) -> Optional[PopulateFn]:
        d = self._definitions.get(column_id)
        return d.populate if d is not None else None

    # --- host-facing ---

    def modify(self, base: Mapping[str, str]) -> Dict[str, str]:
        if self._replacement is not None:
            return dict(self._replacement)

        columns: Dict[str, str] = dict(base)

        for d in self.items:
            columns[d.id] = d.label  # type: ignore[assignment]

        for column_id in self._hidden:
            columns.pop(column_id, None)

        for column_id, position in self._positions.items():
            if column_id not in columns:
                _log.debug("columns.order skip missing column=%s", column_id)
                continue
            label = columns.pop(column_id)
            ordered = list(columns.items())
            ordered.insert(max(position, 0), (column_id, label))
            columns = dict(ordered)

        return columns

    def sortable_columns(self, base: Mapping[str, Any]) -> Dict[str, Any]:
        out = dict(base)
        for d in self._definitions.values():
            if d.sortable is not None:
                out[d.id] = d.sortable.as_meta()
        return out

    def _sort_spec(self, orderby: Any) -> Optional[SortSpec]:
        if not isinstance(orderby, str) or not orderby:
            return None
        d = self._definitions.get(orderby)
        if d is not None and d.sortable is not None:
            return d.sortable
        # the request may name the meta key rather than the column id
        for d in self._definitions.values():
            if d.sortable is not None and d.sortable.meta_key == orderby:
                return d.sortable
        return None

    def is_sortable(self, orderby: Any) -> bool:
        return self._sort_spec(orderby) is not None

    def sort_meta(self, orderby: Any) -> Optional[SortMeta]:
        spec = self._sort_spec(orderby)
        return spec.as_meta() if spec is not None else None

    def sort_order(self, orderby: Any) -> Optional[SortOrder]:
        spec = self._sort_spec(orderby)
        if spec is None:
            return None
        return SortOrder(
            meta_key=spec.meta_key,
            orderby=NUMERIC_ORDERBY if spec.numeric else STRING_ORDERBY,
        )

    def populate(self, column_id: str, record_id: Any) -> Any:
        fn = self.callback_for(column_id)
        if fn is None:
            return None
        return fn(column_id, record_id)
