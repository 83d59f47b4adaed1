from posttypes.core.entities import PostType, Taxonomy
from posttypes.core.host.hooks import HookRegistry

__all__ = ["PostType", "Taxonomy", "HookRegistry"]

__version__ = "2.0.0"
