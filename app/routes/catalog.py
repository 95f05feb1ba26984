from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.schemas.catalog import (
    CategoryCreate, CategoryResponse,
    ServiceCreate, ServiceUpdate, ServiceResponse,
    PackageCreate, PackageUpdate, PackageResponse
)
from app.services.catalog_service import CatalogService

router = APIRouter()

# Category Routes
@router.get("/categories", response_model=List[CategoryResponse])
def get_categories(db: Session = Depends(get_db)):
    return CatalogService.get_categories(db)

@router.post("/categories", response_model=CategoryResponse)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    return CatalogService.create_category(db, category_data)

# Service Routes
@router.get("/services", response_model=List[ServiceResponse])
def get_services(
    category_id: Optional[str] = Query(None),
    include_inactive: bool = Query(False),
    db: Session = Depends(get_db)
):
    """List services ordered by name"""
    return CatalogService.get_services(db, category_id, include_inactive)

@router.post("/services", response_model=ServiceResponse)
def create_service(service_data: ServiceCreate, db: Session = Depends(get_db)):
    return CatalogService.create_service(db, service_data)

@router.get("/services/{service_id}", response_model=ServiceResponse)
def get_service(service_id: str, db: Session = Depends(get_db)):
    return CatalogService.get_service(db, service_id)

@router.put("/services/{service_id}", response_model=ServiceResponse)
def update_service(service_id: str, service_data: ServiceUpdate, db: Session = Depends(get_db)):
    return CatalogService.update_service(db, service_id, service_data)

@router.delete("/services/{service_id}")
def delete_service(service_id: str, db: Session = Depends(get_db)):
    return CatalogService.delete_service(db, service_id)

# Package Routes
@router.get("/packages", response_model=List[PackageResponse])
def get_packages(include_inactive: bool = Query(False), db: Session = Depends(get_db)):
    """List packages with their services"""
    return CatalogService.get_packages(db, include_inactive)

@router.post("/packages", response_model=PackageResponse)
def create_package(package_data: PackageCreate, db: Session = Depends(get_db)):
    return CatalogService.create_package(db, package_data)

@router.get("/packages/{package_id}", response_model=PackageResponse)
def get_package(package_id: str, db: Session = Depends(get_db)):
    return CatalogService.get_package(db, package_id)

@router.put("/packages/{package_id}", response_model=PackageResponse)
def update_package(package_id: str, package_data: PackageUpdate, db: Session = Depends(get_db)):
    """Update a package; sending services replaces the package contents"""
    return CatalogService.update_package(db, package_id, package_data)

@router.delete("/packages/{package_id}")
def delete_package(package_id: str, db: Session = Depends(get_db)):
    return CatalogService.delete_package(db, package_id)
