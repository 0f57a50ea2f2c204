"""Personal access token model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from bizdocs.database import Base
from bizdocs.models.mixins import TimestampMixin


class PersonalAccessToken(Base, TimestampMixin):
    """A live bearer token. Deleting the row revokes the token."""

    __tablename__ = "personal_access_tokens"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    token_digest = Column(String(64), unique=True, nullable=False)  # sha256 of the jti
    last_used_at = Column(DateTime(timezone=True), nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship("User", back_populates="tokens")
