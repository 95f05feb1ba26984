import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload
from fastapi import HTTPException, status

from app.models.catalog import Category, Service, Package, PackageService
from app.schemas.catalog import (
    CategoryCreate, ServiceCreate, ServiceUpdate, PackageCreate, PackageUpdate, PackageServiceInput
)

logger = logging.getLogger(__name__)

class CatalogService:
    @staticmethod
    def create_category(db: Session, category_data: CategoryCreate):
        existing = db.query(Category).filter(Category.name == category_data.name).first()
        if existing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Category already exists"
            )

        category = Category(name=category_data.name)
        db.add(category)
        db.commit()
        db.refresh(category)
        return category

    @staticmethod
    def get_categories(db: Session):
        return db.query(Category).order_by(Category.name).all()

    @staticmethod
    def create_service(db: Session, service_data: ServiceCreate):
        """Create a new service"""
        if service_data.category_id:
            category = db.query(Category).filter(Category.id == service_data.category_id).first()
            if not category:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Category not found"
                )

        try:
            service = Service(**service_data.model_dump())
            db.add(service)
            db.commit()
            db.refresh(service)
            return service

        except Exception as e:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error creating service: {str(e)}"
            )

    @staticmethod
    def get_services(db: Session, category_id: Optional[str] = None, include_inactive: bool = False):
        """Services ordered by name"""
        query = db.query(Service)
        if not include_inactive:
            query = query.filter(Service.is_active == True)
        if category_id:
            query = query.filter(Service.category_id == category_id)
        return query.order_by(Service.name).all()

    @staticmethod
    def get_service(db: Session, service_id: str):
        service = db.query(Service).filter(Service.id == service_id).first()
        if not service:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Service not found"
            )
        return service

    @staticmethod
    def update_service(db: Session, service_id: str, service_data: ServiceUpdate):
        """Update service information"""
        service = CatalogService.get_service(db, service_id)

        update_data = service_data.model_dump(exclude_unset=True)
        try:
            for field, value in update_data.items():
                setattr(service, field, value)

            db.commit()
            db.refresh(service)
            return service

        except Exception as e:
            db.rollback()
            logger.error("Error updating service %s: %s", service_id, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error updating service: {str(e)}"
            )

    @staticmethod
    def delete_service(db: Session, service_id: str):
        """Soft delete a service"""
        service = CatalogService.get_service(db, service_id)
        service.is_active = False
        db.commit()
        return {"message": "Service deleted successfully"}

    @staticmethod
    def _package_services(db: Session, entries: List[PackageServiceInput]):
        ids = [entry.service_id for entry in entries]
        found = {s.id for s in db.query(Service.id).filter(Service.id.in_(ids)).all()} if ids else set()
        missing = [service_id for service_id in ids if service_id not in found]
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Services not found: {', '.join(missing)}"
            )
        if len(set(ids)) != len(ids):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="A service can only appear once in a package"
            )

        return [
            PackageService(
                service_id=entry.service_id,
                package_selling_price=entry.package_selling_price,
                position=position
            )
            for position, entry in enumerate(entries)
        ]

    @staticmethod
    def create_package(db: Session, package_data: PackageCreate):
        """Create a package with its ordered services"""
        package_services = CatalogService._package_services(db, package_data.services)

        try:
            package = Package(
                **package_data.model_dump(exclude={"services"}),
                package_services=package_services
            )
            db.add(package)
            db.commit()
            logger.info("Created package %s with %d services", package.name, len(package_services))
            return CatalogService.get_package(db, package.id)

        except Exception as e:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error creating package: {str(e)}"
            )

    @staticmethod
    def get_packages(db: Session, include_inactive: bool = False):
        query = db.query(Package).options(
            joinedload(Package.package_services).joinedload(PackageService.service)
        )
        if not include_inactive:
            query = query.filter(Package.is_active == True)
        return query.order_by(Package.name).all()

    @staticmethod
    def get_package(db: Session, package_id: str):
        package = db.query(Package).options(
            joinedload(Package.package_services).joinedload(PackageService.service)
        ).filter(Package.id == package_id).first()
        if not package:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Package not found"
            )
        return package

    @staticmethod
    def update_package(db: Session, package_id: str, package_data: PackageUpdate):
        """Update a package; a services list replaces the existing one"""
        package = CatalogService.get_package(db, package_id)

        package_services = None
        if package_data.services is not None:
            package_services = CatalogService._package_services(db, package_data.services)

        try:
            update_data = package_data.model_dump(exclude_unset=True, exclude={"services"})
            for field, value in update_data.items():
                setattr(package, field, value)
            if package_services is not None:
                package.package_services = package_services

            db.commit()

        except Exception as e:
            db.rollback()
            logger.error("Error updating package %s: %s", package_id, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error updating package: {str(e)}"
            )

        return CatalogService.get_package(db, package_id)

    @staticmethod
    def delete_package(db: Session, package_id: str):
        """Soft delete a package"""
        package = CatalogService.get_package(db, package_id)
        package.is_active = False
        db.commit()
        return {"message": "Package deleted successfully"}
