"""Company schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from bizdocs.models.enums import CompanySize


class CompanyCreate(BaseModel):
    """Create a company owned by the caller."""

    cnpj: str = Field(..., min_length=1, max_length=14)
    trade_name: str | None = Field(None, max_length=255)
    legal_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    phone: str = Field(..., min_length=1, max_length=20)
    address: str = Field(..., min_length=1, max_length=255)
    size: CompanySize


class CompanyUpdate(BaseModel):
    """Update a company. Only the fields that are sent are changed."""

    cnpj: str | None = Field(None, min_length=1, max_length=14)
    trade_name: str | None = Field(None, max_length=255)
    legal_name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)
    phone: str | None = Field(None, min_length=1, max_length=20)
    address: str | None = Field(None, min_length=1, max_length=255)
    size: CompanySize | None = None


class CompanyResponse(BaseModel):
    """Company response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    cnpj: str
    legal_name: str
    trade_name: str | None
    address: str
    phone: str
    email: str
    size: CompanySize
    created_at: datetime
    updated_at: datetime
