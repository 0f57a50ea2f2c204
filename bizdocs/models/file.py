"""File metadata model."""

from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from bizdocs.database import Base
from bizdocs.models.mixins import TimestampMixin


class File(Base, TimestampMixin):
    """Metadata for a document blob held in object storage.

    ``path`` references exactly one live blob for as long as the row exists.
    """

    __tablename__ = "files"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)  # original client file name
    hash_name = Column(String(255), nullable=False, unique=True)
    path = Column(String(512), nullable=False)
    mime_type = Column(String(255), nullable=False)
    size = Column(BigInteger, nullable=False)

    # Relationships
    company = relationship("Company", back_populates="files")
    uploader = relationship("User")
