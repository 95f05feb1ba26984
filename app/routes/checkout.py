from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.checkout import CheckoutQuote, CheckoutSelection
from app.services.checkout_service import CheckoutService

router = APIRouter()

@router.post("/quote", response_model=CheckoutQuote)
def quote_checkout(selection: CheckoutSelection, db: Session = Depends(get_db)):
    """Line items and totals for the current selection. Nothing is saved."""
    return CheckoutService.quote(db, selection)
