"""Company model."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from bizdocs.database import Base
from bizdocs.models.enums import CompanySize
from bizdocs.models.mixins import TimestampMixin


class Company(Base, TimestampMixin):
    """A business owned by exactly one user."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    cnpj = Column(String(14), unique=True, nullable=False)  # tax id
    legal_name = Column(String(255), unique=True, nullable=False)
    trade_name = Column(String(255), nullable=True)
    address = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    size = Column(
        Enum(CompanySize, name="companysize", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )

    # Relationships
    user = relationship("User", back_populates="companies")
    files = relationship("File", back_populates="company", cascade="all, delete-orphan")
    service_requests = relationship(
        "ServiceRequest", back_populates="company", cascade="all, delete-orphan"
    )
