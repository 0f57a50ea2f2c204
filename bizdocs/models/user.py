"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from bizdocs.database import Base
from bizdocs.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    companies = relationship("Company", back_populates="user", cascade="all, delete-orphan")
    tokens = relationship(
        "PersonalAccessToken", back_populates="user", cascade="all, delete-orphan"
    )
