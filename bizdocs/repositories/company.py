"""Company repository."""

from bizdocs.models.company import Company
from bizdocs.repositories.base import Repository


class CompanyRepository(Repository[Company]):
    """Persistence for companies. Finders are exact, case-sensitive matches."""

    model = Company
    unique_fields = ("cnpj", "legal_name", "email")

    def find_by_email(self, email: str) -> Company | None:
        return self._find_one_by("email", email)

    def find_by_cnpj(self, cnpj: str) -> Company | None:
        return self._find_one_by("cnpj", cnpj)

    def find_by_trade_name(self, trade_name: str) -> Company | None:
        return self._find_one_by("trade_name", trade_name)

    def find_by_legal_name(self, legal_name: str) -> Company | None:
        return self._find_one_by("legal_name", legal_name)

    def find_by_phone(self, phone: str) -> Company | None:
        return self._find_one_by("phone", phone)

    def find_by_size(self, size: str) -> list[Company]:
        return self.db.query(Company).filter(Company.size == size).order_by(Company.id).all()

    def find_all_by_user_id(self, user_id: int) -> list[Company]:
        return (
            self.db.query(Company).filter(Company.user_id == user_id).order_by(Company.id).all()
        )
