"""File metadata repository."""

from bizdocs.models.file import File
from bizdocs.repositories.base import Repository


class FileRepository(Repository[File]):
    """Persistence for file metadata rows."""

    model = File
    unique_fields = ("hash_name",)

    def find_by_id(self, id: int, lock: bool = False) -> File | None:
        """Find a file row, optionally holding a row lock until the next commit."""
        query = self.db.query(File).filter(File.id == id)
        if lock:
            query = query.with_for_update().populate_existing()
        return query.first()

    def find_all_by_company_ids(self, company_ids: set[int] | list[int]) -> list[File]:
        # An empty scope must yield nothing, never an unscoped query.
        if not company_ids:
            return []
        return (
            self.db.query(File)
            .filter(File.company_id.in_(list(company_ids)))
            .order_by(File.id)
            .all()
        )
