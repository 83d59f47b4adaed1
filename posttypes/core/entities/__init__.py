from .base import BaseEntity
from .models import RegistrationState
from .post_type import PostType
from .taxonomy import Taxonomy

__all__ = ["BaseEntity", "PostType", "RegistrationState", "Taxonomy"]
