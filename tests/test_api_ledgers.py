from conftest import property_payload


def listing(owner, **overrides):
    r = owner.post("/api/properties", json=property_payload(**overrides))
    assert r.status_code == 201
    return r.json()["id"]


def test_favorites_crud(make_client):
    owner = make_client("lebleba", role="landlord")
    tenant = make_client("shakii")
    pid = listing(owner)

    r = tenant.post("/api/favorites", json={"propertyId": pid})
    assert r.status_code == 201
    assert r.json()["propertyId"] == pid

    dup = tenant.post("/api/favorites", json={"propertyId": pid})
    assert dup.status_code == 400
    assert dup.json()["message"] == "Property already in favorites"
    assert [p["id"] for p in tenant.get("/api/favorites").json()] == [pid]

    assert tenant.post("/api/favorites", json={"propertyId": 999}).status_code == 404

    assert tenant.delete(f"/api/favorites/{pid}").status_code == 200
    assert tenant.delete(f"/api/favorites/{pid}").status_code == 404
    assert tenant.get("/api/favorites").json() == []


def test_notifications_endpoints(make_client):
    owner = make_client("lebleba", role="landlord")
    tenant = make_client("shakii")
    stranger = make_client("sarahk", role="agent")
    pid = listing(owner)
    tenant.post("/api/favorites", json={"propertyId": pid})
    stranger.post("/api/favorites", json={"propertyId": pid})

    notes = owner.get("/api/notifications").json()
    assert len(notes) == 2
    assert {n["type"] for n in notes} == {"favorite"}
    assert owner.get("/api/notifications/unread/count").json() == {"count": 2}

    first = notes[0]["id"]
    # someone else's notification looks missing
    assert tenant.post(f"/api/notifications/{first}/read").status_code == 404
    assert owner.post(f"/api/notifications/{first}/read").status_code == 200
    assert owner.get("/api/notifications/unread/count").json() == {"count": 1}

    assert owner.post("/api/notifications/read-all").status_code == 200
    assert owner.get("/api/notifications/unread/count").json() == {"count": 0}
    assert owner.post("/api/notifications/read-all").status_code == 200


def test_reviews_and_rating(make_client, client):
    owner = make_client("lebleba", role="landlord")
    a = make_client("shakii")
    b = make_client("sarahk", role="agent")
    pid = listing(owner)

    assert client.get(f"/api/properties/{pid}/rating").json() == {"rating": None}
    assert client.get(f"/api/properties/{pid}/reviews").json() == []

    r = a.post(f"/api/properties/{pid}/reviews", json={"rating": 5, "comment": "Great views"})
    assert r.status_code == 201
    review_id = r.json()["id"]
    assert r.json()["updatedAt"] is None
    b.post(f"/api/properties/{pid}/reviews", json={"rating": 4, "comment": "Good"})

    assert client.get(f"/api/properties/{pid}/rating").json() == {"rating": 4.5}
    assert len(client.get(f"/api/properties/{pid}/reviews").json()) == 2

    assert a.post(f"/api/properties/{pid}/reviews", json={"rating": 6, "comment": "x"}).status_code == 400
    assert a.post(f"/api/properties/{pid}/reviews", json={"rating": 3, "comment": ""}).status_code == 400
    assert client.post(f"/api/properties/{pid}/reviews", json={"rating": 3, "comment": "x"}).status_code == 401
    assert a.post("/api/properties/999/reviews", json={"rating": 3, "comment": "x"}).status_code == 404
    assert client.get("/api/properties/999/rating").status_code == 404

    assert b.put(f"/api/reviews/{review_id}", json={"rating": 1, "comment": "hijack"}).status_code == 403
    r = a.put(f"/api/reviews/{review_id}", json={"rating": 3, "comment": "Changed my mind"})
    assert r.status_code == 200
    assert r.json()["updatedAt"] is not None
    assert client.get(f"/api/properties/{pid}/rating").json() == {"rating": 3.5}

    assert b.delete(f"/api/reviews/{review_id}").status_code == 403
    assert a.delete(f"/api/reviews/{review_id}").json() == {"success": True}
    assert a.delete(f"/api/reviews/{review_id}").status_code == 404
    assert client.get(f"/api/properties/{pid}/rating").json() == {"rating": 4.0}


def test_neighborhoods(make_client, client):
    assert client.get("/api/neighborhoods").json() == []
    assert client.post("/api/neighborhoods", json={"name": "Karen", "city": "Nairobi"}).status_code == 401

    user = make_client("shakii")
    r = user.post("/api/neighborhoods", json={"name": "Karen", "city": "Nairobi", "description": "Leafy"})
    assert r.status_code == 201
    nid = r.json()["id"]
    assert r.json()["propertyCount"] == 0

    assert client.get(f"/api/neighborhoods/{nid}").json()["name"] == "Karen"
    assert client.get("/api/neighborhoods/999").status_code == 404
    assert client.get("/api/neighborhoods/x").status_code == 400
