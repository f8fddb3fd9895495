from conftest import property_payload


def test_list_filters_and_sort_end_to_end(make_client, client):
    owner = make_client("lebleba", role="landlord")
    owner.post("/api/properties", json=property_payload(title="Small", price=20000, bedrooms=1))
    owner.post("/api/properties", json=property_payload(title="Large", price=50000, bedrooms=3))

    r = client.get("/api/properties", params={"minPrice": 30000})
    assert [p["title"] for p in r.json()] == ["Large"]

    r = client.get("/api/properties", params={"listingType": "rent", "minBedrooms": 2})
    assert [p["title"] for p in r.json()] == ["Large"]

    r = client.get("/api/properties", params={"sortBy": "price-high"})
    assert [p["title"] for p in r.json()] == ["Large", "Small"]


def test_features_query_requires_all(make_client, client):
    owner = make_client("lebleba", role="landlord")
    owner.post("/api/properties", json=property_payload(title="Parking", features=["parking"]))
    owner.post("/api/properties", json=property_payload(title="Both", features=["parking", "gym"]))
    r = client.get("/api/properties", params={"features": "parking,gym"})
    assert [p["title"] for p in r.json()] == ["Both"]


def test_no_matches_is_an_empty_list(client):
    r = client.get("/api/properties", params={"search": "castle"})
    assert r.status_code == 200
    assert r.json() == []


def test_malformed_numeric_params_are_400(client):
    assert client.get("/api/properties", params={"minPrice": "cheap"}).status_code == 400
    assert client.get("/api/properties/abc").status_code == 400
    assert client.get("/api/properties", params={"sortBy": "random"}).status_code == 400


def test_create_uses_session_owner_and_defaults(make_client):
    owner = make_client("lebleba", role="landlord")
    body = property_payload(features=None)
    body["ownerId"] = 999
    r = owner.post("/api/properties", json=body)
    assert r.status_code == 201
    prop = r.json()
    assert prop["ownerId"] == owner.user["id"]
    assert prop["verified"] is False
    assert prop["features"] == []
    assert prop["images"] == []


def test_create_requires_login_and_valid_body(client, make_client):
    assert client.post("/api/properties", json=property_payload()).status_code == 401
    owner = make_client("lebleba", role="landlord")
    r = owner.post("/api/properties", json=property_payload(propertyType="castle"))
    assert r.status_code == 400
    assert r.json()["message"] == "Validation failed"


def test_get_property_with_owner_and_favorite_flag(make_client, client):
    owner = make_client("lebleba", role="landlord")
    pid = owner.post("/api/properties", json=property_payload()).json()["id"]
    tenant = make_client("shakii")
    tenant.post("/api/favorites", json={"propertyId": pid})

    anon = client.get(f"/api/properties/{pid}").json()
    assert anon["isFavorite"] is False
    assert anon["owner"]["username"] == "lebleba"
    assert "password" not in anon["owner"]

    assert tenant.get(f"/api/properties/{pid}").json()["isFavorite"] is True
    assert client.get("/api/properties/999").status_code == 404


def test_update_and_delete_are_owner_only(make_client, client):
    owner = make_client("lebleba", role="landlord")
    other = make_client("sarahk", role="agent")
    pid = owner.post("/api/properties", json=property_payload()).json()["id"]

    assert other.patch(f"/api/properties/{pid}", json={"price": 1}).status_code == 403
    assert other.delete(f"/api/properties/{pid}").status_code == 403

    r = owner.patch(f"/api/properties/{pid}", json={"price": 47000, "features": ["gym"]})
    assert r.status_code == 200
    assert r.json()["price"] == 47000
    assert r.json()["features"] == ["gym"]
    assert r.json()["title"] == "Modern 2 Bedroom Apartment"

    assert owner.patch(f"/api/properties/{pid}", json={"price": -5}).status_code == 400

    r = owner.put(f"/api/properties/{pid}", json=property_payload(title="Renamed", listingType="sale"))
    assert r.status_code == 200
    assert r.json()["listingType"] == "sale"

    assert owner.delete(f"/api/properties/{pid}").status_code == 200
    assert client.get(f"/api/properties/{pid}").status_code == 404
    assert owner.delete(f"/api/properties/{pid}").status_code == 404


def test_ids_are_not_reused_after_delete(make_client):
    owner = make_client("lebleba", role="landlord")
    first = owner.post("/api/properties", json=property_payload()).json()["id"]
    owner.delete(f"/api/properties/{first}")
    second = owner.post("/api/properties", json=property_payload()).json()["id"]
    assert second > first


def test_delete_removes_favorites_and_reviews(make_client):
    owner = make_client("lebleba", role="landlord")
    tenant = make_client("shakii")
    pid = owner.post("/api/properties", json=property_payload()).json()["id"]
    tenant.post("/api/favorites", json={"propertyId": pid})
    tenant.post(f"/api/properties/{pid}/reviews", json={"rating": 5, "comment": "Lovely"})
    tenant.post("/api/messages", json={"receiverId": owner.user["id"], "content": "Hi", "propertyId": pid})

    owner.delete(f"/api/properties/{pid}")
    assert tenant.get("/api/favorites").json() == []
    thread = tenant.get(f"/api/messages/{owner.user['id']}").json()["messages"]
    assert thread[0]["propertyId"] is None


def test_my_properties(make_client):
    owner = make_client("lebleba", role="landlord")
    other = make_client("sarahk", role="agent")
    owner.post("/api/properties", json=property_payload(title="Mine"))
    other.post("/api/properties", json=property_payload(title="Theirs"))
    assert [p["title"] for p in owner.get("/api/users/me/properties").json()] == ["Mine"]


def test_security_headers(client):
    r = client.get("/api/health")
    assert r.json() == {"status": "ok"}
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"


def test_out_of_range_integers_are_400(make_client, client):
    too_big = 10**20
    assert client.get(f"/api/properties/{too_big}").status_code == 400
    assert client.get(f"/api/properties/{too_big}/rating").status_code == 400
    assert client.get("/api/properties/0").status_code == 400

    owner = make_client("lebleba", role="landlord")
    r = owner.post("/api/properties", json=property_payload(price=too_big))
    assert r.status_code == 400
    assert r.json()["message"] == "Validation failed"
    assert owner.post("/api/properties", json=property_payload(area=too_big)).status_code == 400

    pid = owner.post("/api/properties", json=property_payload()).json()["id"]
    assert owner.patch(f"/api/properties/{pid}", json={"price": too_big}).status_code == 400
    assert owner.post("/api/favorites", json={"propertyId": too_big}).status_code == 400
    assert owner.post("/api/messages", json={"receiverId": too_big, "content": "hi"}).status_code == 400
    assert owner.get(f"/api/messages/{too_big}").status_code == 400
    assert owner.delete(f"/api/reviews/{too_big}").status_code == 400
