"""
Loans API routes.
"""
from datetime import date
from typing import Optional

from api.routes.resource import SERVICES_PREFIX, CamelModel, build_resource_router
from domain.models import Loan
from repositories import LoansRepository

BASE_PATH = f"{SERVICES_PREFIX}/loans"
loans_repo = LoansRepository()


class LoanPayload(CamelModel):
    borrower_id: int
    media_id: int
    start_loan_date: Optional[date] = None
    end_loan_date: Optional[date] = None


class LoanResponse(LoanPayload):
    id: int


router = build_resource_router(BASE_PATH, loans_repo, Loan, LoanPayload, LoanResponse)
