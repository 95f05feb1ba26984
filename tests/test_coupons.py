from sqlalchemy.exc import SQLAlchemyError

from app.services.coupon_service import filter_coupons
from tests.conftest import make_coupon


def test_filter_coupons_matches_code_or_description():
    coupons = [
        make_coupon(id="1", code="SUMMER10", description="Summer sale"),
        make_coupon(id="2", code="WELCOME", description="First visit"),
        make_coupon(id="3", code="VIP", description=None),
    ]
    assert [c.code for c in filter_coupons(coupons, "summer")] == ["SUMMER10"]
    assert [c.code for c in filter_coupons(coupons, "VISIT")] == ["WELCOME"]
    assert [c.code for c in filter_coupons(coupons, "")] == ["SUMMER10", "WELCOME", "VIP"]
    assert filter_coupons(coupons, "nothing") == []


def create(client, **fields):
    payload = {"code": "summer10", "discount_type": "percentage", "discount_value": 10}
    payload.update(fields)
    return client.post("/api/coupons/", json=payload)


def test_create_coupon_normalizes_code(client):
    response = create(client)
    assert response.status_code == 200
    data = response.json()
    assert data["code"] == "SUMMER10"
    assert data["is_active"] is True
    assert data["apply_to_all"] is True


def test_duplicate_code_rejected(client):
    create(client)
    response = create(client, code="SUMMER10")
    assert response.status_code == 400


def test_list_is_active_only_and_ordered(client):
    create(client, code="zeta")
    create(client, code="alpha", description="Spring promo")
    gone = create(client, code="old").json()
    client.delete(f"/api/coupons/{gone['id']}")

    codes = [c["code"] for c in client.get("/api/coupons/").json()]
    assert codes == ["ALPHA", "ZETA"]

    found = client.get("/api/coupons/", params={"q": "spring"}).json()
    assert [c["code"] for c in found] == ["ALPHA"]


def test_validate_coupon_returns_discount(client):
    create(client, code="flat", discount_type="fixed", discount_value=300)
    response = client.post("/api/coupons/validate", json={"code": "Flat", "subtotal": 250})
    assert response.status_code == 200
    assert response.json()["discount"] == 250


def test_validate_inactive_coupon(client):
    coupon = create(client, code="expired").json()
    client.delete(f"/api/coupons/{coupon['id']}")
    response = client.post("/api/coupons/validate", json={"code": "EXPIRED", "subtotal": 100})
    assert response.status_code == 404


def test_get_unknown_coupon(client):
    assert client.get("/api/coupons/nope").status_code == 404


def test_update_coupon_to_apply_to_all_clears_lists(client):
    coupon = create(client, apply_to_all=False, applicable_services=["svc-1"]).json()
    assert coupon["applicable_services"] == ["svc-1"]

    updated = client.put(f"/api/coupons/{coupon['id']}", json={"apply_to_all": True}).json()
    assert updated["apply_to_all"] is True
    assert updated["applicable_services"] == []


def test_failed_update_rolls_back(client, db, monkeypatch):
    coupon = create(client, description="Before").json()

    def failing_commit():
        raise SQLAlchemyError("database unavailable")

    monkeypatch.setattr(db, "commit", failing_commit)
    response = client.put(f"/api/coupons/{coupon['id']}", json={"description": "After"})
    monkeypatch.undo()

    assert response.status_code == 500
    assert client.get(f"/api/coupons/{coupon['id']}").json()["description"] == "Before"
