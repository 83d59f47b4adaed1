from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from ..capabilities import CapabilitySet, build_capabilities, grant_capabilities
from ..columns import ColumnRegistry
from ..errors import InvalidArgumentError, PostTypesError
from ..host.contracts import HostPlatform, QueryVars
from ..host.hooks import HookRegistry
from ..labels import POST_TYPE_LABELS, build_labels
from ..merge import merge_options
from ..naming import NamesInput, NameSet, derive_names
from .models import RegistrationState
from .state_machine import ensure_transition

_log = logging.getLogger("posttypes.entities")


def _as_mapping(value: Any, what: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(f"{what} must be a mapping, got {type(value).__name__}")
    return dict(value)


def _as_key_list(value: Any, what: str) -> list:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set, frozenset)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise InvalidArgumentError(f"{what} must be a string or a list of strings, got {value!r}")


class BaseEntity:
    """
    Shared builder for post types and taxonomies.

    Subclasses set ``kind`` plus the default options / label templates and
    wire their own host hooks in ``register()``.
    """

    kind: str = ""
    label_templates: Mapping[str, str] = POST_TYPE_LABELS

    def __init__(self, names: NamesInput, options: Optional[Mapping[str, Any]] = None, labels: Optional[Mapping[str, Any]] = None):
        self.state = RegistrationState.UNREGISTERED
        self.host: Optional[HostPlatform] = None

        self.names(names)
        self.options(options)
        self.labels(labels)

        self.capability_set = CapabilitySet()
        self._columns = ColumnRegistry()

        self._transition(RegistrationState.PENDING)

    # --- builder ---

    def names(self, names: NamesInput) -> "BaseEntity":
        self.name_set: NameSet = derive_names(names)
        self.raw_names = names
        return self

    def options(self, options: Optional[Mapping[str, Any]]) -> "BaseEntity":
        self.custom_options = _as_mapping(options, "options")
        return self

    def labels(self, labels: Optional[Mapping[str, Any]]) -> "BaseEntity":
        self.custom_labels = _as_mapping(labels, "labels")
        return self

    def capabilities(self, capabilities: Optional[Mapping[str, str]] = None, whitelisted_roles: Optional[Iterable[str]] = None) -> "BaseEntity":
        explicit = _as_mapping(capabilities, "capabilities")
        roles = _as_key_list(whitelisted_roles, "whitelisted_roles") if whitelisted_roles else []
        self.capability_set = build_capabilities(self.name_set, explicit, roles, kind=self.kind)
        return self

    def columns(self) -> ColumnRegistry:
        return self._columns

    # --- names ---

    @property
    def name(self) -> str:
        return self.name_set.key

    @property
    def singular(self) -> str:
        return self.name_set.singular

    @property
    def plural(self) -> str:
        return self.name_set.plural

    @property
    def slug(self) -> str:
        return self.name_set.slug

    # --- configuration ---

    def default_options(self) -> Dict[str, Any]:
        return {"rewrite": {"slug": self.slug}}

    def create_labels(self) -> Dict[str, Any]:
        return build_labels(self.name_set, self.custom_labels, self.label_templates)

    def _inject(self, options: Dict[str, Any]) -> None:
        """Subclass hook for entity-specific fields."""

    def build_config(self) -> Dict[str, Any]:
        options = merge_options(self.default_options(), self.custom_options)

        if "labels" not in options:
            options["labels"] = self.create_labels()

        self._inject(options)

        if "capabilities" not in options and self.capability_set:
            options["capabilities"] = dict(self.capability_set.capabilities)

        return options

    create_options = build_config

    # --- lifecycle ---

    def _transition(self, dst: RegistrationState) -> None:
        ensure_transition(self.state, dst)
        if self.state != dst:
            _log.debug("entity.state kind=%s key=%s %s -> %s", self.kind, self.name, self.state.value, dst.value)
        self.state = dst

    def _require_host(self) -> HostPlatform:
        if self.host is None:
            raise PostTypesError(f"{self.kind} '{self.name}' is not bound to a host; call register() first")
        return self.host

    def register(self, hooks: HookRegistry, host: HostPlatform) -> "BaseEntity":
        self.host = host
        if host.entity_exists(self.kind, self.name):
            hooks.add_filter(f"register_{self.kind}_args", self.modify_args, 10, 2)
        else:
            hooks.add_action("init", self.register_entity, accepted_args=0)
        hooks.add_action("init", self.grant_capabilities, accepted_args=0)
        self._register_hooks(hooks)
        return self

    def _register_hooks(self, hooks: HookRegistry) -> None:
        raise NotImplementedError

    def register_entity(self) -> None:
        host = self._require_host()
        if host.entity_exists(self.kind, self.name):
            _log.debug("entity.register skip existing kind=%s key=%s", self.kind, self.name)
            return
        host.register_entity(self.kind, self.name, self.build_config())
        self._transition(RegistrationState.REGISTERED)
        _log.info("entity.registered kind=%s key=%s", self.kind, self.name)

    def modify_args(self, args: Dict[str, Any], key: str) -> Dict[str, Any]:
        if key != self.name:
            return args
        merged = merge_options(args, self.build_config())
        self._transition(RegistrationState.REGISTERED)
        _log.info("entity.modified kind=%s key=%s", self.kind, self.name)
        return merged

    def grant_capabilities(self) -> None:
        if not self.capability_set.roles:
            return
        granted = grant_capabilities(self.capability_set, self._require_host())
        _log.debug("entity.grant kind=%s key=%s grants=%s", self.kind, self.name, granted)

    def flush(self, hard: bool = True) -> None:
        self._require_host().flush_rewrite_rules(hard)

    # --- columns ---

    def modify_columns(self, columns: Mapping[str, str]) -> Dict[str, str]:
        return self._columns.modify(columns)

    def set_sortable_columns(self, columns: Mapping[str, Any]) -> Dict[str, Any]:
        return self._columns.sortable_columns(columns)

    def _apply_sort(self, query: QueryVars, orderby: Any) -> bool:
        order = self._columns.sort_order(orderby)
        if order is None:
            return False
        query.set("meta_key", order.meta_key)
        query.set("orderby", order.orderby)
        return True
