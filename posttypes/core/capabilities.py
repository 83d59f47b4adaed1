from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .host.contracts import POST_TYPE, TAXONOMY, HostPlatform
from .naming import NameSet

_log = logging.getLogger("posttypes.capabilities")

# "{singular}" is the lowercased singular name, "{slug}" the entity slug.
POST_TYPE_CAPABILITIES: Dict[str, str] = {
    "edit_post": "edit_{singular}",
    "read_post": "read_{singular}",
    "delete_post": "delete_{singular}",
    "edit_posts": "edit_{slug}",
    "edit_others_posts": "edit_others_{slug}",
    "publish_posts": "publish_{slug}",
    "read_private_posts": "read_private_{slug}",
    "create_posts": "edit_{slug}",
}

TAXONOMY_CAPABILITIES: Dict[str, str] = {
    "manage_terms": "manage_{slug}",
    "edit_terms": "edit_{slug}",
    "delete_terms": "delete_{slug}",
    "assign_terms": "assign_{slug}",
}

_TEMPLATES = {
    POST_TYPE: POST_TYPE_CAPABILITIES,
    TAXONOMY: TAXONOMY_CAPABILITIES,
}


@dataclass(frozen=True)
class CapabilitySet:
    capabilities: Dict[str, str] = field(default_factory=dict)
    roles: Tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.capabilities)

    def names(self) -> Tuple[str, ...]:
        """Distinct capability names, first occurrence order."""
        return tuple(dict.fromkeys(self.capabilities.values()))


def build_capabilities(
    names: NameSet,
    explicit: Optional[Mapping[str, str]] = None,
    whitelisted_roles: Optional[Iterable[str]] = None,
    *,
    kind: str = POST_TYPE,
) -> CapabilitySet:
    if explicit:
        caps = dict(explicit)
    else:
        singular = names.singular.lower()
        caps = {
            action: template.format(singular=singular, slug=names.slug)
            for action, template in _TEMPLATES[kind].items()
        }

    roles = tuple(dict.fromkeys(whitelisted_roles or ()))
    return CapabilitySet(capabilities=caps, roles=roles)


def grant_capabilities(capability_set: CapabilitySet, host: HostPlatform) -> int:
    """Grant every capability to every whitelisted role the host knows.

    Returns the number of (role, capability) grants issued.
    """
    granted = 0
    for role in capability_set.roles:
        if not host.role_exists(role):
            _log.debug("capabilities.grant skip unknown role=%s", role)
            continue
        for cap in capability_set.names():
            host.grant_capability(role, cap)
            granted += 1
    return granted
