# src/edustack/auth/__init__.py
from .deps import current_user_id, get_current_user, require_user

__all__ = ["current_user_id", "get_current_user", "require_user"]
