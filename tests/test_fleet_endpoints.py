CAR = {
    "brand": "Kia",
    "model": "Rio",
    "year": 2022,
    "color": "Red",
    "license_plate": "xyz-987",
    "daily_rate": "39.90",
}


def test_create_car_normalizes_plate(client):
    res = client.post("/api/v1/cars", json=CAR)

    assert res.status_code == 201
    body = res.json()
    assert body["license_plate"] == "XYZ-987"
    assert body["status"] == "AVAILABLE"
    assert body["daily_rate"] == "39.90"


def test_duplicate_plate_returns_409(client):
    client.post("/api/v1/cars", json=CAR)

    res = client.post("/api/v1/cars", json={**CAR, "license_plate": "XYZ-987"})

    assert res.status_code == 409
    assert res.json()["code"] == "DUPLICATE_VALUE"
    assert res.json()["field"] == "license_plate"


def test_car_payload_validated_upstream(client):
    assert client.post("/api/v1/cars", json={**CAR, "year": 1800}).status_code == 422
    assert client.post("/api/v1/cars", json={**CAR, "status": "STOLEN"}).status_code == 422
    assert client.post("/api/v1/cars", json={**CAR, "vin": "123"}).status_code == 422


def test_maintenance_keeps_existing_rentals(client, seeded_ids):
    rental = client.post(
        "/api/v1/rentals",
        json={**seeded_ids, "start_date": "2024-06-01", "end_date": "2024-06-05", "total_cost": "100"},
    ).json()

    updated = client.patch(f"/api/v1/cars/{seeded_ids['car_id']}", json={"status": "MAINTENANCE"})
    kept = client.get(f"/api/v1/rentals/{rental['id']}")

    assert updated.status_code == 200
    assert updated.json()["status"] == "MAINTENANCE"
    assert kept.json()["status"] == "ACTIVE"


def test_car_crud_lifecycle(client):
    car_id = client.post("/api/v1/cars", json=CAR).json()["id"]

    listed = client.get("/api/v1/cars").json()
    fetched = client.get(f"/api/v1/cars/{car_id}")
    deleted = client.delete(f"/api/v1/cars/{car_id}")
    missing = client.get(f"/api/v1/cars/{car_id}")

    assert listed["total"] == 1
    assert fetched.json()["model"] == "Rio"
    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert missing.json()["code"] == "CAR_NOT_FOUND"


def test_car_with_active_rental_cannot_be_deleted(client, seeded_ids):
    rental = client.post(
        "/api/v1/rentals",
        json={**seeded_ids, "start_date": "2024-06-01", "end_date": "2024-06-05", "total_cost": "100"},
    ).json()
    car_url = f"/api/v1/cars/{seeded_ids['car_id']}"

    refused = client.delete(car_url)
    client.patch(f"/api/v1/rentals/{rental['id']}", json={"status": "CANCELLED"})
    accepted = client.delete(car_url)

    assert refused.status_code == 409
    assert refused.json()["code"] == "RECORD_IN_USE"
    assert refused.json()["active_rental_ids"] == [rental["id"]]
    assert accepted.status_code == 204


def test_client_email_must_be_valid(client):
    res = client.post(
        "/api/v1/clients",
        json={
            "first_name": "Jane",
            "last_name": "Roe",
            "email": "not-an-email",
            "phone": "+15551234567",
            "driver_license": "DL-0002",
        },
    )

    assert res.status_code == 422


def test_client_update_and_duplicate_email(client, seeded_ids):
    other = client.post(
        "/api/v1/clients",
        json={
            "first_name": "John",
            "last_name": "Doe",
            "email": "john@example.com",
            "phone": "+15557654321",
            "driver_license": "DL-0002",
        },
    ).json()

    renamed = client.patch(f"/api/v1/clients/{other['id']}", json={"address": "Av. Reforma 1"})
    clash = client.patch(f"/api/v1/clients/{other['id']}", json={"email": "jane@example.com"})

    assert renamed.status_code == 200
    assert renamed.json()["address"] == "Av. Reforma 1"
    assert clash.status_code == 409
    assert clash.json()["field"] == "email"


def test_employee_crud(client, seeded_ids):
    employee_id = seeded_ids["employee_id"]

    fetched = client.get(f"/api/v1/employees/{employee_id}").json()
    updated = client.patch(f"/api/v1/employees/{employee_id}", json={"position": "Branch manager"})
    listed = client.get("/api/v1/employees", params={"limit": 1}).json()

    assert fetched["hire_date"] == "2022-03-01"
    assert updated.json()["position"] == "Branch manager"
    assert listed["total"] == 1
    assert listed["limit"] == 1
    assert client.delete(f"/api/v1/employees/{employee_id}").status_code == 204
    assert client.get(f"/api/v1/employees/{employee_id}").json()["code"] == "EMPLOYEE_NOT_FOUND"
