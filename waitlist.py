import logging
from typing import Optional

from pymongo.errors import DuplicateKeyError, PyMongoError

from database import WAITLIST, Store
from errors import ConflictError, PersistenceError, ValidationError
from schemas import WaitlistEntry

logger = logging.getLogger(__name__)


class WaitlistService:
    def __init__(self, store: Store):
        self.store = store

    def join(self, email: Optional[str]) -> int:
        """Record an email once. A second sign-up with the same email is rejected."""
        email = (email or "").strip()
        if not email:
            raise ValidationError("Email is required")
        try:
            return self.store.create_document(WAITLIST, WaitlistEntry(email=email))
        except DuplicateKeyError as e:
            logger.info("Waitlist sign-up for %s rejected as duplicate", email)
            raise ConflictError("Email already exists") from e
        except PyMongoError as e:
            raise PersistenceError("Failed to join waitlist") from e
