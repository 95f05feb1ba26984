from datetime import date, datetime, time

import pytest


@pytest.fixture
def setup(client):
    location = client.post("/api/staff/locations", json={"name": "Indiranagar"}).json()
    stylist = client.post("/api/staff/employees", json={
        "name": "Asha Rao", "location_id": location["id"],
    }).json()
    customer = client.post("/api/customers/", json={
        "full_name": "Meera Shah", "email": "meera@example.com",
    }).json()
    haircut = client.post("/api/catalog/services", json={
        "name": "Haircut", "duration": 60, "selling_price": 500,
    }).json()
    return {"location": location, "stylist": stylist, "customer": customer, "haircut": haircut}


def book(client, setup, start, **extra):
    payload = {
        "customer_id": setup["customer"]["id"],
        "location_id": setup["location"]["id"],
        "start_time": start,
        "selected_services": [setup["haircut"]["id"]],
        "selected_stylists": {setup["haircut"]["id"]: setup["stylist"]["id"]},
    }
    payload.update(extra)
    return client.post("/api/appointments/", json=payload)


def test_create_appointment(client, setup):
    haircut_id = setup["haircut"]["id"]
    response = book(client, setup, "2026-03-10T10:00:00", selected_time_slots={haircut_id: "10:30 AM"})
    assert response.status_code == 200
    appointment = response.json()
    assert appointment["status"] == "booked"
    assert appointment["total_price"] == 500
    assert appointment["end_time"] == "2026-03-10T11:00:00"
    [booking] = appointment["bookings"]
    assert booking["start_time"] == "2026-03-10T10:30:00"
    assert booking["employee"]["name"] == "Asha Rao"
    assert booking["price_paid"] == 500


def test_empty_selection_rejected(client, setup):
    response = book(client, setup, "2026-03-10T10:00:00", selected_services=["stale"])
    assert response.status_code == 400


def test_unknown_customer(client, setup):
    response = book(client, setup, "2026-03-10T10:00:00", customer_id="nobody")
    assert response.status_code == 404


def test_bad_time_slot(client, setup):
    haircut_id = setup["haircut"]["id"]
    response = book(client, setup, "2026-03-10T10:00:00", selected_time_slots={haircut_id: "soon"})
    assert response.status_code == 400


def test_appointments_by_date(client, setup):
    book(client, setup, "2026-03-10T15:00:00")
    book(client, setup, "2026-03-10T09:00:00")
    book(client, setup, "2026-03-11T09:00:00")

    listed = client.get("/api/appointments/", params={"date": "2026-03-10"}).json()
    assert [a["start_time"] for a in listed] == ["2026-03-10T09:00:00", "2026-03-10T15:00:00"]

    other = client.get("/api/appointments/", params={"date": "2026-03-10", "location_id": "elsewhere"}).json()
    assert other == []


def test_status_and_reschedule(client, setup):
    haircut_id = setup["haircut"]["id"]
    appointment = book(client, setup, "2026-03-10T10:00:00", selected_time_slots={haircut_id: "10:30 AM"}).json()

    confirmed = client.put(f"/api/appointments/{appointment['id']}/status", json={"status": "confirmed"}).json()
    assert confirmed["status"] == "confirmed"

    # 180px below the top of the grid is 11:00
    moved = client.put(f"/api/appointments/{appointment['id']}/reschedule", json={"offset_px": 180}).json()
    assert moved["start_time"] == "2026-03-10T11:00:00"
    assert moved["end_time"] == "2026-03-10T12:00:00"
    assert moved["bookings"][0]["start_time"] == "2026-03-10T11:30:00"


def test_reschedule_needs_a_target(client, setup):
    appointment = book(client, setup, "2026-03-10T10:00:00").json()
    response = client.put(f"/api/appointments/{appointment['id']}/reschedule", json={})
    assert response.status_code == 400


def test_calendar_day(client, setup):
    book(client, setup, "2026-03-10T09:30:00")
    day = client.get("/api/appointments/calendar", params={"date": "2026-03-10"}).json()
    assert day["hour_labels"][0] == "8:00am"
    [event] = day["events"]
    assert event["title"] == "Haircut"
    assert event["top"] == 90
    assert event["height"] == 60
    assert event["label"] == "9:30am - 10:30am"


def test_todays_appointments_summary(client, setup):
    start = datetime.combine(date.today(), time(9, 0)).isoformat()
    book(client, setup, start)

    summary = client.get("/api/dashboard/todays-appointments", params={"location_id": "all"}).json()
    assert summary["total"] == 1
    assert summary["booked"] == 1
    assert summary["confirmed"] == 0
    [entry] = summary["appointments"]
    assert entry["time"] == "09:00"
    assert entry["service_name"] == "Haircut"
    assert entry["customer_name"] == "Meera Shah"
    assert entry["stylist_name"] == "Asha Rao"
    assert entry["price"] == 500
