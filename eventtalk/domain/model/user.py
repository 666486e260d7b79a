"""User entity.

Users are owned by another part of the platform. Event Talk only reads
them to show who wrote a comment.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from eventtalk.domain.model.common import DomainModel
from eventtalk.domain.value import UserId


class User(DomainModel):
    """A registered user."""

    id: UserId
    username: str = Field(min_length=1, max_length=100)
    email: Optional[str] = None  # Contact handle shown next to comments
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> "AuthorSummary":
        """Restricted projection attached to comments."""
        return AuthorSummary(id=self.id, username=self.username, email=self.email)


class AuthorSummary(DomainModel):
    """The part of a user that is embedded in comment results."""

    id: UserId
    username: str
    email: Optional[str] = None
