from . import auth_flow, dashboard, health, resources, users

__all__ = ["auth_flow", "dashboard", "health", "resources", "users"]
