from .alumni import alumni_service
from .auth import auth_service
from .feed import feed_service
from .profile import profile_service

__all__ = ["alumni_service", "auth_service", "feed_service", "profile_service"]
