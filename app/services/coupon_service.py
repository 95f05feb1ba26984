import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.coupon import Coupon
from app.schemas.coupon import CouponCreate, CouponUpdate
from app.utils.validators import normalize_coupon_code, sanitize_input

logger = logging.getLogger(__name__)


def filter_coupons(coupons: List[Coupon], search_query: Optional[str]) -> List[Coupon]:
    """Case-insensitive match on code or description; an empty query keeps everything"""
    if not search_query:
        return list(coupons)

    needle = search_query.lower()
    return [
        coupon for coupon in coupons
        if needle in coupon.code.lower()
        or (coupon.description and needle in coupon.description.lower())
    ]


class CouponService:
    @staticmethod
    def list_active_coupons(db: Session) -> List[Coupon]:
        """Active coupons ordered by code; an empty list when the query fails"""
        try:
            return db.query(Coupon).filter(Coupon.is_active == True).order_by(Coupon.code).all()
        except SQLAlchemyError as e:
            logger.error("Error fetching coupons: %s", e)
            return []

    @staticmethod
    def search_coupons(db: Session, search_query: Optional[str] = None) -> List[Coupon]:
        return filter_coupons(CouponService.list_active_coupons(db), search_query)

    @staticmethod
    def get_coupon_by_id(db: Session, coupon_id: str) -> Optional[Coupon]:
        try:
            return db.query(Coupon).filter(Coupon.id == coupon_id).first()
        except SQLAlchemyError as e:
            logger.error("Error fetching coupon %s: %s", coupon_id, e)
            return None

    @staticmethod
    def validate_coupon_code(db: Session, code: str) -> Optional[Coupon]:
        """The active coupon with this code, or None"""
        try:
            return db.query(Coupon).filter(
                Coupon.code == normalize_coupon_code(code),
                Coupon.is_active == True
            ).first()
        except SQLAlchemyError as e:
            logger.error("Error validating coupon code %s: %s", code, e)
            return None

    @staticmethod
    def create_coupon(db: Session, coupon_data: CouponCreate) -> Coupon:
        code = normalize_coupon_code(coupon_data.code)
        if not code:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Coupon code is required"
            )

        existing = db.query(Coupon).filter(Coupon.code == code).first()
        if existing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Coupon code {code} already exists"
            )

        try:
            data = coupon_data.model_dump()
            data["code"] = code
            data["description"] = sanitize_input(data.get("description"))
            if data["apply_to_all"]:
                data["applicable_services"] = []
                data["applicable_packages"] = []

            coupon = Coupon(**data)
            db.add(coupon)
            db.commit()
            db.refresh(coupon)
            logger.info("Created coupon %s", coupon.code)
            return coupon

        except Exception as e:
            db.rollback()
            logger.error("Error creating coupon: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error creating coupon: {str(e)}"
            )

    @staticmethod
    def update_coupon(db: Session, coupon_id: str, coupon_data: CouponUpdate) -> Coupon:
        coupon = CouponService.get_coupon_by_id(db, coupon_id)
        if not coupon:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Coupon not found"
            )

        update_data = coupon_data.model_dump(exclude_unset=True)
        if "description" in update_data:
            update_data["description"] = sanitize_input(update_data["description"])
        if update_data.get("apply_to_all"):
            update_data["applicable_services"] = []
            update_data["applicable_packages"] = []

        try:
            for field, value in update_data.items():
                setattr(coupon, field, value)

            db.commit()
            db.refresh(coupon)
            logger.info("Updated coupon %s", coupon.code)
            return coupon

        except Exception as e:
            db.rollback()
            logger.error("Error updating coupon %s: %s", coupon_id, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error updating coupon: {str(e)}"
            )

    @staticmethod
    def deactivate_coupon(db: Session, coupon_id: str):
        coupon = CouponService.get_coupon_by_id(db, coupon_id)
        if not coupon:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Coupon not found"
            )

        coupon.is_active = False
        db.commit()
        return {"message": "Coupon deactivated successfully"}
