from .auth_controller import router as auth_router
from .bootcamp_controller import router as bootcamp_router


__all__ = ["auth_router", "bootcamp_router"]
