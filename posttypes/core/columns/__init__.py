from .models import ColumnDefinition, SortOrder, SortSpec
from .registry import ColumnRegistry

__all__ = ["ColumnDefinition", "ColumnRegistry", "SortOrder", "SortSpec"]
