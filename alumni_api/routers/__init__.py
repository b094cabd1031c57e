from .auth import router as auth_router
from .admin import router as admin_router
from .profile import router as profile_router
from .alumni import router as alumni_router
from .feed import router as feed_router

# profile_router (/api/alumni/me) must be registered before alumni_router (/api/alumni/{user_id})
ROUTERS = (auth_router, admin_router, profile_router, alumni_router, feed_router)

__all__ = [
    "ROUTERS",
    "auth_router",
    "admin_router",
    "profile_router",
    "alumni_router",
    "feed_router",
]
