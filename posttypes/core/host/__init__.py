from .contracts import POST_TYPE, TAXONOMY, HostPlatform, QueryVars, TaxonomyInfo
from .hooks import HookEntry, HookRegistry
from .memory import InMemoryHost, InMemoryQuery

__all__ = [
    "POST_TYPE",
    "TAXONOMY",
    "HostPlatform",
    "QueryVars",
    "TaxonomyInfo",
    "HookEntry",
    "HookRegistry",
    "InMemoryHost",
    "InMemoryQuery",
]
