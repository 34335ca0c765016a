"""DB session dependencies (composition root)."""

from teamauth.infrastructure.persistence.database import get_db, get_db_transactional

__all__ = ["get_db", "get_db_transactional"]
