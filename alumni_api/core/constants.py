"""Shared API constants."""

# Roles stored on users.user_role
ROLE_ALUMNI = "alumni"
ROLE_ADMINISTRATOR = "administrator"

# Collection list endpoints: default page size and upper bound
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
