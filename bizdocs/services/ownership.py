"""Ownership chain checks: User owns Company owns File.

Nothing here is cached; every call reads the current rows so revoked access
and moved companies take effect on the next request.
"""

from sqlalchemy.orm import Session

from bizdocs.exceptions import NotFound
from bizdocs.models.company import Company
from bizdocs.models.file import File
from bizdocs.models.user import User


def owned_company_ids(db: Session, user_id: int) -> set[int]:
    """IDs of the companies owned by the user; empty when there are none."""
    rows = db.query(Company.id).filter(Company.user_id == user_id).all()
    return {company_id for (company_id,) in rows}


def owns_company(company: Company | None, user: User) -> bool:
    return company is not None and company.user_id == user.id


def get_owned_company(db: Session, company_id: int, user: User) -> Company:
    """Get a company owned by the user.

    A company owned by somebody else is reported exactly like a missing one.
    """
    company = db.query(Company).filter(Company.id == company_id).first()
    if not owns_company(company, user):
        raise NotFound("Company")
    return company


def get_owned_file(db: Session, file_id: int, user: User, lock: bool = False) -> File:
    """Get a file whose company is owned by the user.

    With ``lock`` the row stays locked (``SELECT ... FOR UPDATE``) until the
    session commits or rolls back.
    """
    query = (
        db.query(File)
        .join(Company, File.company_id == Company.id)
        .filter(File.id == file_id, Company.user_id == user.id)
    )
    if lock:
        query = query.with_for_update(of=File).populate_existing()
    record = query.first()
    if record is None:
        raise NotFound("File")
    return record
