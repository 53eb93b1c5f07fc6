"""HTTP routers."""

from bookreview.routers.root import WELCOME_MESSAGE, create_root_router

__all__ = ["WELCOME_MESSAGE", "create_root_router"]
