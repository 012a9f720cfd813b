from conftest import GUEST, HOST, OTHER_GUEST, OTHER_HOST, booking_payload, property_payload

# ---------- HELPERS ----------

def create_property(client, auth_headers, principal=HOST, **overrides):
    r = client.post("/api/properties", json=property_payload(**overrides), headers=auth_headers(principal))
    assert r.status_code == 201
    return r.json()

def create_booking(client, auth_headers, property_id, check_in="2024-06-10T00:00:00",
                   check_out="2024-06-15T00:00:00", principal=GUEST):
    return client.post(
        "/api/bookings",
        json=booking_payload(property_id, check_in, check_out),
        headers=auth_headers(principal),
    )

# ---------- HAPPY PATH TESTS ----------

def test_root_and_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200

def test_create_and_get_property(client, auth_headers):
    prop = create_property(client, auth_headers)
    assert prop["host_id"] == HOST.user_id
    assert prop["status"] == "active"
    assert prop["rating"] is None

    r = client.get(f"/api/properties/{prop['id']}")
    assert r.status_code == 200
    assert r.json() == prop

def test_list_properties_with_filters(client, auth_headers):
    create_property(client, auth_headers, title="Big", max_guests=8)
    create_property(client, auth_headers, title="Small", max_guests=2)
    create_property(client, auth_headers, title="Draft", max_guests=10, status="draft")

    r = client.get("/api/properties", params={"max_guests": 6})
    assert r.status_code == 200
    assert [p["title"] for p in r.json()] == ["Big"]
    assert len(client.get("/api/properties").json()) == 2

    r = client.get(f"/api/hosts/{HOST.user_id}/properties")
    assert len(r.json()) == 3

def test_update_and_delete_property(client, auth_headers):
    prop = create_property(client, auth_headers)
    r = client.put(f"/api/properties/{prop['id']}", json={"title": "Villa"}, headers=auth_headers(HOST))
    assert r.status_code == 200
    assert r.json()["title"] == "Villa"

    r = client.delete(f"/api/properties/{prop['id']}", headers=auth_headers(HOST))
    assert r.status_code == 200
    assert client.get(f"/api/properties/{prop['id']}").status_code == 404

def test_booking_payment_review_flow(client, auth_headers):
    prop = create_property(client, auth_headers)

    r = create_booking(client, auth_headers, prop["id"])
    assert r.status_code == 201
    booking = r.json()
    assert booking["status"] == "pending"
    assert booking["payment_status"] == "pending"

    r = client.post("/api/payments", json={"booking_id": booking["id"], "amount": 50000, "upi_id": "guest@upi"},
                    headers=auth_headers(GUEST))
    assert r.status_code == 201
    payment = r.json()
    assert payment["status"] == "success"

    r = client.get(f"/api/bookings/{booking['id']}", headers=auth_headers(GUEST))
    assert r.json()["status"] == "confirmed"
    assert r.json()["payment_status"] == "paid"

    r = client.get(f"/api/bookings/{booking['id']}/payment", headers=auth_headers(GUEST))
    assert r.status_code == 200
    assert r.json()["id"] == payment["id"]

    r = client.put(f"/api/bookings/{booking['id']}", json={"status": "completed"}, headers=auth_headers(HOST))
    assert r.status_code == 200
    assert r.json()["status"] == "completed"

    r = client.post("/api/reviews", json={"booking_id": booking["id"], "rating": 4, "comment": "Nice"},
                    headers=auth_headers(GUEST))
    assert r.status_code == 201
    assert r.json()["property_id"] == prop["id"]

    assert client.get(f"/api/properties/{prop['id']}").json()["rating"] == "4.00"
    assert len(client.get(f"/api/properties/{prop['id']}/reviews").json()) == 1

def test_user_bookings_are_scoped_to_caller(client, auth_headers):
    prop = create_property(client, auth_headers)
    create_booking(client, auth_headers, prop["id"])
    create_booking(client, auth_headers, prop["id"], "2024-07-01T00:00:00", "2024-07-03T00:00:00",
                   principal=OTHER_GUEST)

    r = client.get("/api/bookings", headers=auth_headers(GUEST))
    assert [b["user_id"] for b in r.json()] == [GUEST.user_id]

def test_property_bookings_view_depends_on_caller(client, auth_headers):
    prop = create_property(client, auth_headers)
    create_booking(client, auth_headers, prop["id"])

    public = client.get(f"/api/properties/{prop['id']}/bookings").json()
    assert public == [{
        "check_in_date": "2024-06-10T00:00:00",
        "check_out_date": "2024-06-15T00:00:00",
        "status": "pending",
    }]

    as_host = client.get(f"/api/properties/{prop['id']}/bookings", headers=auth_headers(HOST)).json()
    assert as_host[0]["user_id"] == GUEST.user_id

# ---------- EDGE CASE TESTS ----------

def test_mutations_require_token(client):
    assert client.post("/api/properties", json=property_payload()).status_code == 401
    assert client.get("/api/bookings").status_code == 401
    r = client.get("/api/bookings", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401

def test_guest_cannot_create_property(client, auth_headers):
    r = client.post("/api/properties", json=property_payload(), headers=auth_headers(GUEST))
    assert r.status_code == 403

def test_other_host_cannot_modify_property(client, auth_headers):
    prop = create_property(client, auth_headers)
    r = client.put(f"/api/properties/{prop['id']}", json={"title": "x"}, headers=auth_headers(OTHER_HOST))
    assert r.status_code == 403
    r = client.delete(f"/api/properties/{prop['id']}", headers=auth_headers(OTHER_HOST))
    assert r.status_code == 403

def test_nonexistent_property(client, auth_headers):
    assert client.get("/api/properties/999").status_code == 404
    assert client.put("/api/properties/999", json={"title": "x"}, headers=auth_headers(HOST)).status_code == 404
    assert client.delete("/api/properties/999", headers=auth_headers(HOST)).status_code == 404
    assert create_booking(client, auth_headers, 999).status_code == 404

def test_booking_conflicts_and_invalid_ranges(client, auth_headers):
    prop = create_property(client, auth_headers)
    assert create_booking(client, auth_headers, prop["id"]).status_code == 201

    r = create_booking(client, auth_headers, prop["id"], "2024-06-12T00:00:00", "2024-06-20T00:00:00",
                       principal=OTHER_GUEST)
    assert r.status_code == 400
    assert "not available" in r.text

    r = create_booking(client, auth_headers, prop["id"], "2024-06-15T00:00:00", "2024-06-20T00:00:00",
                       principal=OTHER_GUEST)
    assert r.status_code == 201

    r = create_booking(client, auth_headers, prop["id"], "2024-08-05T00:00:00", "2024-08-01T00:00:00")
    assert r.status_code == 400
    assert "Check-out" in r.text

def test_duplicate_payment_rejected(client, auth_headers):
    prop = create_property(client, auth_headers)
    booking = create_booking(client, auth_headers, prop["id"]).json()
    body = {"booking_id": booking["id"], "amount": 50000}

    assert client.post("/api/payments", json=body, headers=auth_headers(GUEST)).status_code == 201
    r = client.post("/api/payments", json=body, headers=auth_headers(GUEST))
    assert r.status_code == 400
    assert "already exists" in r.text

def test_payment_access_checks(client, auth_headers):
    prop = create_property(client, auth_headers)
    booking = create_booking(client, auth_headers, prop["id"]).json()

    r = client.post("/api/payments", json={"booking_id": booking["id"], "amount": 1}, headers=auth_headers(OTHER_GUEST))
    assert r.status_code == 403
    r = client.post("/api/payments", json={"booking_id": 999, "amount": 1}, headers=auth_headers(GUEST))
    assert r.status_code == 404
    r = client.get(f"/api/bookings/{booking['id']}/payment", headers=auth_headers(GUEST))
    assert r.status_code == 404
    r = client.get(f"/api/bookings/{booking['id']}/payment", headers=auth_headers(OTHER_GUEST))
    assert r.status_code == 403
    assert client.put("/api/payments/999", json={"status": "success"}, headers=auth_headers(GUEST)).status_code == 404

def test_review_before_completion_rejected(client, auth_headers):
    prop = create_property(client, auth_headers)
    booking = create_booking(client, auth_headers, prop["id"]).json()

    r = client.post("/api/reviews", json={"booking_id": booking["id"], "rating": 5}, headers=auth_headers(GUEST))
    assert r.status_code == 400
    assert "completing your stay" in r.text

    r = client.post("/api/reviews", json={"booking_id": booking["id"], "rating": 5}, headers=auth_headers(OTHER_GUEST))
    assert r.status_code == 403
    assert client.get(f"/api/properties/{prop['id']}").json()["rating"] is None

def test_stranger_cannot_view_or_update_booking(client, auth_headers):
    prop = create_property(client, auth_headers)
    booking = create_booking(client, auth_headers, prop["id"]).json()

    assert client.get(f"/api/bookings/{booking['id']}", headers=auth_headers(OTHER_GUEST)).status_code == 403
    r = client.put(f"/api/bookings/{booking['id']}", json={"status": "cancelled"}, headers=auth_headers(OTHER_GUEST))
    assert r.status_code == 403
    assert client.put("/api/bookings/999", json={"status": "cancelled"}, headers=auth_headers(GUEST)).status_code == 404

def test_bookings_mixing_offset_and_naive_dates(client, auth_headers):
    prop = create_property(client, auth_headers)
    r = create_booking(client, auth_headers, prop["id"], "2024-06-10T00:00:00Z", "2024-06-15T00:00:00Z")
    assert r.status_code == 201

    r = create_booking(client, auth_headers, prop["id"], "2024-06-20T00:00:00", "2024-06-25T00:00:00",
                       principal=OTHER_GUEST)
    assert r.status_code == 201

    r = create_booking(client, auth_headers, prop["id"], "2024-06-14T00:00:00", "2024-06-16T00:00:00",
                       principal=OTHER_GUEST)
    assert r.status_code == 400

def test_null_property_fields_are_left_unchanged(client, auth_headers):
    prop = create_property(client, auth_headers)
    r = client.put(f"/api/properties/{prop['id']}", json={"title": None, "bedrooms": 5}, headers=auth_headers(HOST))
    assert r.status_code == 200
    assert r.json()["title"] == prop["title"]
    assert r.json()["bedrooms"] == 5
