"""Company operations scoped to the owning user."""

import logging

from sqlalchemy.orm import Session

from bizdocs.exceptions import NotFound
from bizdocs.models.company import Company
from bizdocs.models.user import User
from bizdocs.repositories.company import CompanyRepository
from bizdocs.schemas.company import CompanyCreate, CompanyUpdate
from bizdocs.services.file_service import FileService
from bizdocs.services.locks import company_locks
from bizdocs.services.ownership import get_owned_company, owns_company
from bizdocs.services.storage import ObjectStorage

logger = logging.getLogger(__name__)

# Columns that may be cleared by sending an explicit null.
NULLABLE_FIELDS = {"trade_name"}


class CompanyService:
    """Service for company-related operations."""

    def __init__(self, db: Session, storage: ObjectStorage):
        self.db = db
        self.storage = storage
        self.companies = CompanyRepository(db)

    def find_all(self, caller: User) -> list[Company]:
        return self.companies.find_all_by_user_id(caller.id)

    def create(self, data: CompanyCreate, caller: User) -> Company:
        values = data.model_dump()
        values["user_id"] = caller.id
        company = self.companies.create(values)
        logger.info(f"Company {company.id} created for user {caller.id}")
        return company

    def find_by_id(self, company_id: int, caller: User) -> Company:
        return get_owned_company(self.db, company_id, caller)

    def update(self, company_id: int, data: CompanyUpdate, caller: User) -> Company:
        """Merge the sent fields into the company."""
        company = get_owned_company(self.db, company_id, caller)
        changes = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        if changes:
            self.companies.update(company_id, changes)
            self.db.refresh(company)
        return company

    def delete(self, company_id: int, caller: User) -> bool:
        """Delete a company together with its files and their blobs."""
        get_owned_company(self.db, company_id, caller)
        with company_locks.hold(company_id):
            removed = FileService(self.db, self.storage).delete_all_for_company(company_id)
            deleted = self.companies.delete(company_id)
        logger.info(f"Company {company_id} deleted with {removed} file(s)")
        return deleted

    def find_by_email(self, email: str, caller: User) -> Company:
        return self._owned(self.companies.find_by_email(email), caller)

    def find_by_cnpj(self, cnpj: str, caller: User) -> Company:
        return self._owned(self.companies.find_by_cnpj(cnpj), caller)

    def find_by_trade_name(self, trade_name: str, caller: User) -> Company:
        return self._owned(self.companies.find_by_trade_name(trade_name), caller)

    def find_by_legal_name(self, legal_name: str, caller: User) -> Company:
        return self._owned(self.companies.find_by_legal_name(legal_name), caller)

    def find_by_phone(self, phone: str, caller: User) -> Company:
        return self._owned(self.companies.find_by_phone(phone), caller)

    def find_by_size(self, size: str, caller: User) -> list[Company]:
        return [c for c in self.companies.find_by_size(size) if c.user_id == caller.id]

    @staticmethod
    def _owned(company: Company | None, caller: User) -> Company:
        if not owns_company(company, caller):
            raise NotFound("Company")
        return company
