from datetime import date

from sqlalchemy.exc import SQLAlchemyError

from app.services.membership_service import add_months


def create_customer(client, name="Meera Shah"):
    return client.post("/api/customers/", json={"full_name": name, "phone_number": "+919812345678"}).json()


def test_add_months_clamps_day():
    assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert add_months(date(2026, 11, 15), 3) == date(2027, 2, 15)


def test_apply_to_all_clears_lists(client):
    response = client.post("/api/memberships/", json={
        "name": "Gold",
        "discount_type": "percentage",
        "discount_value": 10,
        "apply_to_all": True,
        "applicable_services": ["svc-1"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["apply_to_all"] is True
    assert data["applicable_services"] == []


def test_explicit_applicability(client):
    data = client.post("/api/memberships/", json={
        "name": "Hair Club",
        "discount_type": "fixed",
        "discount_value": 100,
        "max_discount_value": 250,
        "min_billing_amount": 1000,
        "apply_to_all": False,
        "applicable_services": ["svc-1"],
        "applicable_packages": ["pkg-1"],
    }).json()
    assert data["apply_to_all"] is False
    assert data["applicable_packages"] == ["pkg-1"]
    assert data["max_discount_value"] == 250


def test_update_and_delete(client):
    membership = client.post("/api/memberships/", json={"name": "Silver", "discount_value": 5}).json()

    updated = client.put(f"/api/memberships/{membership['id']}", json={"discount_value": 7.5}).json()
    assert updated["discount_value"] == 7.5

    assert client.delete(f"/api/memberships/{membership['id']}").status_code == 200
    assert client.get("/api/memberships/").json() == []


def test_assign_membership_sets_end_date(client):
    customer = create_customer(client)
    membership = client.post("/api/memberships/", json={
        "name": "Monthly", "discount_value": 10, "validity_period": 1, "validity_unit": "months",
    }).json()

    response = client.post(f"/api/memberships/{membership['id']}/assign", json={
        "customer_id": customer["id"], "start_date": "2026-01-31",
    })
    assert response.status_code == 200
    assert response.json()["end_date"] == "2026-02-28"


def test_assign_to_unknown_customer(client):
    membership = client.post("/api/memberships/", json={"name": "Gold", "discount_value": 10}).json()
    response = client.post(f"/api/memberships/{membership['id']}/assign", json={"customer_id": "nobody"})
    assert response.status_code == 404


def test_unknown_membership(client):
    assert client.get("/api/memberships/missing").status_code == 404


def test_failed_update_rolls_back(client, db, monkeypatch):
    membership = client.post("/api/memberships/", json={"name": "Silver", "discount_value": 5}).json()

    def failing_commit():
        raise SQLAlchemyError("database unavailable")

    monkeypatch.setattr(db, "commit", failing_commit)
    response = client.put(f"/api/memberships/{membership['id']}", json={"discount_value": 50})
    monkeypatch.undo()

    assert response.status_code == 500
    assert client.get(f"/api/memberships/{membership['id']}").json()["discount_value"] == 5
