"""Service request model."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from bizdocs.database import Base
from bizdocs.models.enums import ServiceRequestStatus
from bizdocs.models.mixins import TimestampMixin


class ServiceRequest(Base, TimestampMixin):
    """A request for service opened on behalf of a company."""

    __tablename__ = "service_requests"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        Enum(
            ServiceRequestStatus,
            name="servicerequeststatus",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=ServiceRequestStatus.OPEN,
    )

    # Relationships
    company = relationship("Company", back_populates="service_requests")
