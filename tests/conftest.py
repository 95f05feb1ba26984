import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Coupon, DiscountType, Membership, Package, PackageService, Service

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# Unsaved catalog rows for the pure pricing tests

@pytest.fixture
def haircut():
    return Service(id="svc-haircut", name="Haircut", selling_price=500.0, duration=60)


@pytest.fixture
def facial():
    return Service(id="svc-facial", name="Facial", selling_price=1000.0, duration=90)


@pytest.fixture
def manicure():
    return Service(id="svc-manicure", name="Manicure", selling_price=300.0, duration=30)


@pytest.fixture
def services(haircut, facial, manicure):
    return [haircut, facial, manicure]


@pytest.fixture
def glow_package(haircut, facial):
    """Haircut + facial (1500 at list price) sold for 1200"""
    return Package(
        id="pkg-glow",
        name="Glow Package",
        price=1200.0,
        is_customizable=True,
        package_services=[
            PackageService(service=haircut, position=0),
            PackageService(service=facial, position=1),
        ],
    )


@pytest.fixture
def duo_package(haircut, manicure):
    """Haircut at an override price of 400 plus a manicure, sold for 700"""
    return Package(
        id="pkg-duo",
        name="Duo",
        price=700.0,
        is_customizable=False,
        package_services=[
            PackageService(service=haircut, package_selling_price=400.0, position=0),
            PackageService(service=manicure, position=1),
        ],
    )


def make_membership(**overrides):
    fields = dict(
        id="mem-gold",
        name="Gold",
        discount_type=DiscountType.PERCENTAGE,
        discount_value=10.0,
        max_discount_value=None,
        min_billing_amount=None,
        applicable_services=[],
        applicable_packages=[],
    )
    fields.update(overrides)
    return Membership(**fields)


def make_coupon(**overrides):
    fields = dict(
        id="cpn-1",
        code="WELCOME",
        description="Welcome offer",
        discount_type=DiscountType.FIXED,
        discount_value=50.0,
        is_active=True,
        apply_to_all=True,
        applicable_services=[],
        applicable_packages=[],
    )
    fields.update(overrides)
    return Coupon(**fields)
