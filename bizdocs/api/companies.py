"""Company API endpoints. Every route only sees the caller's companies."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from bizdocs.api.dependencies import get_company_service, get_current_user
from bizdocs.models.enums import CompanySize
from bizdocs.models.user import User
from bizdocs.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from bizdocs.services.company_service import CompanyService

router = APIRouter(prefix="/api/v1/companies", tags=["companies"])

CurrentUser = Annotated[User, Depends(get_current_user)]
Companies = Annotated[CompanyService, Depends(get_company_service)]


@router.get("", response_model=list[CompanyResponse])
def list_companies(current_user: CurrentUser, companies: Companies):
    """List the companies owned by the current user."""
    return companies.find_all(current_user)


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(company_data: CompanyCreate, current_user: CurrentUser, companies: Companies):
    """Create a company owned by the current user."""
    return companies.create(company_data, current_user)


@router.get("/cnpj/{cnpj}", response_model=CompanyResponse)
def find_by_cnpj(cnpj: str, current_user: CurrentUser, companies: Companies):
    """Find one of the caller's companies by exact tax id."""
    return companies.find_by_cnpj(cnpj, current_user)


@router.get("/email/{email}", response_model=CompanyResponse)
def find_by_email(email: str, current_user: CurrentUser, companies: Companies):
    """Find one of the caller's companies by exact email."""
    return companies.find_by_email(email, current_user)


@router.get("/legal-name/{legal_name}", response_model=CompanyResponse)
def find_by_legal_name(legal_name: str, current_user: CurrentUser, companies: Companies):
    """Find one of the caller's companies by exact legal name."""
    return companies.find_by_legal_name(legal_name, current_user)


@router.get("/trade-name/{trade_name}", response_model=CompanyResponse)
def find_by_trade_name(trade_name: str, current_user: CurrentUser, companies: Companies):
    """Find one of the caller's companies by exact trade name."""
    return companies.find_by_trade_name(trade_name, current_user)


@router.get("/phone/{phone}", response_model=CompanyResponse)
def find_by_phone(phone: str, current_user: CurrentUser, companies: Companies):
    """Find one of the caller's companies by exact phone number."""
    return companies.find_by_phone(phone, current_user)


@router.get("/size/{size}", response_model=list[CompanyResponse])
def find_by_size(size: CompanySize, current_user: CurrentUser, companies: Companies):
    """List the caller's companies of one size classification."""
    return companies.find_by_size(size.value, current_user)


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: int, current_user: CurrentUser, companies: Companies):
    """Get a specific company."""
    return companies.find_by_id(company_id, current_user)


@router.put("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: int,
    company_data: CompanyUpdate,
    current_user: CurrentUser,
    companies: Companies,
):
    """Update a company. Only the sent fields change."""
    return companies.update(company_id, company_data, current_user)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(company_id: int, current_user: CurrentUser, companies: Companies):
    """Delete a company and its files."""
    companies.delete(company_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
