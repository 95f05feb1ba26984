from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.schemas.coupon import (
    CouponCreate, CouponUpdate, CouponResponse, CouponDiscountRequest, CouponDiscountResponse
)
from app.services.coupon_service import CouponService
from app.services.discounts import calculate_coupon_discount

router = APIRouter()

@router.get("/", response_model=List[CouponResponse])
def get_coupons(q: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Active coupons ordered by code, filtered on code or description"""
    return CouponService.search_coupons(db, q)

@router.post("/", response_model=CouponResponse)
def create_coupon(coupon_data: CouponCreate, db: Session = Depends(get_db)):
    return CouponService.create_coupon(db, coupon_data)

@router.post("/validate", response_model=CouponDiscountResponse)
def validate_coupon(request: CouponDiscountRequest, db: Session = Depends(get_db)):
    """Check a code and work out its discount on a subtotal"""
    coupon = CouponService.validate_coupon_code(db, request.code)
    if not coupon:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invalid or inactive coupon code"
        )

    return CouponDiscountResponse(
        coupon=CouponResponse.model_validate(coupon),
        subtotal=request.subtotal,
        discount=round(calculate_coupon_discount(coupon, request.subtotal), 2)
    )

@router.get("/{coupon_id}", response_model=CouponResponse)
def get_coupon(coupon_id: str, db: Session = Depends(get_db)):
    coupon = CouponService.get_coupon_by_id(db, coupon_id)
    if not coupon:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Coupon not found"
        )
    return coupon

@router.put("/{coupon_id}", response_model=CouponResponse)
def update_coupon(coupon_id: str, coupon_data: CouponUpdate, db: Session = Depends(get_db)):
    return CouponService.update_coupon(db, coupon_id, coupon_data)

@router.delete("/{coupon_id}")
def deactivate_coupon(coupon_id: str, db: Session = Depends(get_db)):
    return CouponService.deactivate_coupon(db, coupon_id)
