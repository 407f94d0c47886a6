"""
Loan repository backed by SQLAlchemy.
"""
from domain.models import Loan
from repositories.base import ResourceRepository
from repositories.models import LoanORM


class LoansRepository(ResourceRepository[Loan]):
    """CRUD operations for loans. A borrower holds at most one loan per media."""

    orm_class = LoanORM
    natural_key = ("borrower_id", "media_id")

    def to_domain(self, orm: LoanORM) -> Loan:
        return Loan(
            id=orm.id,
            borrower_id=orm.borrower_id,
            media_id=orm.media_id,
            start_loan_date=orm.start_loan_date,
            end_loan_date=orm.end_loan_date,
        )

    def to_columns(self, loan: Loan) -> dict:
        return {
            "borrower_id": loan.borrower_id,
            "media_id": loan.media_id,
            "start_loan_date": loan.start_loan_date,
            "end_loan_date": loan.end_loan_date,
        }
