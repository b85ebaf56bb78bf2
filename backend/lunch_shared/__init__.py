"""
Shared module for the lunch ordering REST API.

STRUCTURE:
- lunch_shared.security: Credentials and abuse protection
  - auth.py: Bearer header parsing
  - password.py: Bcrypt hashing, unusable passwords for provider accounts
  - tokens.py: Friendly auth tokens, external identity token decoding
  - rate_limit.py: slowapi limiter for sign-in

- lunch_shared.infrastructure: Database plumbing
  - db.py: SQLAlchemy sessions, transaction(), safe_commit()

- lunch_shared.config: Configuration
  - settings.py: Environment config (Pydantic)
  - logging.py: Structured logging, request id context
  - constants.py: Resource names, weekdays, limits

- lunch_shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - schemas.py: Shared Pydantic schemas
  - clock.py: Reference time zone and day boundaries

IMPORT EXAMPLES:
    from lunch_shared.infrastructure.db import get_db, transaction
    from lunch_shared.config.settings import settings
    from lunch_shared.security.auth import bearer_token
    from lunch_shared.utils.exceptions import NotFoundError, ForbiddenError
"""
