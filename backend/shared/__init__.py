"""
Shared module for infrastructure used by the REST API.

STRUCTURE:
- shared.infrastructure: Database and request correlation
  - db.py: SQLAlchemy engine, sessions, safe_commit()
  - correlation.py: X-Request-ID middleware and logging filter

- shared.config: Configuration
  - settings.py: Environment config (Pydantic)
  - logging.py: Structured logging

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - admin_schemas.py: Transfer objects (DTOs) for every entity

IMPORT EXAMPLES:
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.utils.exceptions import NotFoundError, ValidationError
    from shared.utils.admin_schemas import BranchDTO
"""
