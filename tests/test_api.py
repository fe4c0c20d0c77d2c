"""
HTTP endpoints
"""
from conftest import worker_payload, employer_payload


def register(client, payload):
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "healthy"

    health = client.get("/health").json()
    assert health["storage"] == "memory"
    assert health["records"]["users"] == 0
    assert health["chat_connections"] == 0


def test_register_worker_omits_password(client):
    body = register(client, worker_payload())

    assert body["email"] == "worker@example.com"
    assert body["firstName"] == "Maria"
    assert body["role"] == "worker"
    assert body["id"]
    assert "createdAt" in body
    assert "password" not in body


def test_register_duplicate_email_is_400(client):
    register(client, worker_payload())

    response = client.post("/api/auth/register", json=worker_payload())

    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


def test_register_worker_missing_profile_fields_is_400(client):
    payload = worker_payload()
    del payload["skills"]

    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["errors"]


def test_register_invalid_role_is_400(client):
    response = client.post("/api/auth/register", json=worker_payload(role="admin"))
    assert response.status_code == 400


def test_login(client):
    user = register(client, worker_payload())

    response = client.post("/api/auth/login", json={"email": "worker@example.com", "password": "password123"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user["id"]
    assert body["email"] == "worker@example.com"
    assert body["firstName"] == "Maria"
    assert body["role"] == "worker"
    assert "password" not in body
    assert body["accessToken"]
    assert body["tokenType"] == "bearer"


def test_email_is_stored_and_matched_exactly_as_typed(client):
    user = register(client, worker_payload(email="Maria@Example.COM"))
    assert user["email"] == "Maria@Example.COM"

    response = client.post("/api/auth/login", json={"email": "Maria@Example.COM", "password": "password123"})
    assert response.status_code == 200
    assert response.json()["id"] == user["id"]

    other = register(client, worker_payload(email="maria@example.com"))
    assert other["id"] != user["id"]


def test_register_rejects_malformed_email(client):
    response = client.post("/api/auth/register", json=worker_payload(email="not-an-email"))
    assert response.status_code == 400


def test_register_accepts_short_password(client):
    register(client, worker_payload(password="abc"))

    response = client.post("/api/auth/login", json={"email": "worker@example.com", "password": "abc"})
    assert response.status_code == 200


def test_register_empty_password_is_400(client):
    response = client.post("/api/auth/register", json=worker_payload(password=""))
    assert response.status_code == 400


def test_login_bad_credentials_is_401(client):
    register(client, worker_payload())

    wrong = client.post("/api/auth/login", json={"email": "worker@example.com", "password": "nope-nope"})
    unknown = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "password123"})

    assert wrong.status_code == 401
    assert wrong.json()["detail"] == "Invalid credentials"
    assert unknown.status_code == 401


def test_search_workers(client):
    cleaner = register(client, worker_payload())
    register(client, worker_payload(email="plumber@example.com", skills="Plumbing", location="Boulder, CO"))
    register(client, employer_payload())

    everyone = client.get("/api/workers").json()
    assert len(everyone) == 2
    assert all(w["role"] == "worker" for w in everyone)

    cleaners = client.get("/api/workers", params={"skills": "CLEAN"}).json()
    assert [w["id"] for w in cleaners] == [cleaner["id"]]
    assert cleaners[0]["workerProfile"]["skills"] == "Professional Cleaner, Organizing"
    assert "password" not in cleaners[0]

    boulder = client.get("/api/workers", params={"location": "boulder", "availability": "Available Now"}).json()
    assert len(boulder) == 1
    assert client.get("/api/workers", params={"availability": "This Week"}).json() == []


def test_get_worker(client):
    worker = register(client, worker_payload())
    employer = register(client, employer_payload())

    response = client.get(f"/api/workers/{worker['id']}")
    assert response.status_code == 200
    assert response.json()["workerProfile"]["location"] == "Denver, CO"

    assert client.get(f"/api/workers/{employer['id']}").status_code == 404
    assert client.get("/api/workers/unknown").json()["detail"] == "Worker not found"


def test_connections_flow(client):
    worker = register(client, worker_payload())
    employer = register(client, employer_payload())
    other_employer = register(client, employer_payload(email="other@example.com"))

    response = client.post("/api/connections", json={"employerId": employer["id"], "workerId": worker["id"]})
    assert response.status_code == 201
    connection = response.json()
    assert connection["status"] == "connected"
    assert connection["employerId"] == employer["id"]

    hired = client.post("/api/connections", json={
        "employerId": other_employer["id"], "workerId": worker["id"], "status": "hired", "lastProject": "Kitchen",
    })
    assert hired.json()["status"] == "hired"

    listed = client.get(f"/api/connections/{employer['id']}").json()
    assert [c["id"] for c in listed] == [connection["id"]]
    assert listed[0]["worker"]["id"] == worker["id"]
    assert listed[0]["worker"]["workerProfile"]["skills"] == "Professional Cleaner, Organizing"
    assert "password" not in listed[0]["worker"]

    by_worker = client.get(f"/api/connections/worker/{worker['id']}").json()
    assert len(by_worker) == 2


def test_connection_with_unknown_users_is_400(client):
    employer = register(client, employer_payload())

    response = client.post("/api/connections", json={"employerId": employer["id"], "workerId": "missing"})
    assert response.status_code == 400

    response = client.post("/api/connections", json={"employerId": employer["id"]})
    assert response.status_code == 400

    response = client.post("/api/connections", json={
        "employerId": employer["id"], "workerId": "missing", "status": "fired",
    })
    assert response.status_code == 400


def test_connections_for_unknown_employer_is_empty(client):
    assert client.get("/api/connections/nobody").json() == []


def test_chat_history_limit(client, memory_store):
    from laborconnect.schemas.chat import ChatMessageCreate

    for text in ["A", "B", "C"]:
        memory_store.add_chat_message(ChatMessageCreate(user_id="u1", user_name="Ann", message=text))

    assert [m["message"] for m in client.get("/api/chat/messages").json()] == ["A", "B", "C"]

    latest = client.get("/api/chat/messages", params={"limit": 2}).json()
    assert [m["message"] for m in latest] == ["B", "C"]
    assert set(latest[0]) == {"id", "userId", "userName", "message", "timestamp"}


def test_contact(client):
    response = client.post("/api/contact", json={
        "name": "Pat", "email": "pat@example.com", "subject": "Hi", "message": "How do I hire?",
    })

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Message sent successfully"
    assert body["id"]
    assert client.get("/health").json()["records"]["contact_messages"] == 1


def test_contact_missing_fields_is_400(client):
    response = client.post("/api/contact", json={"name": "Pat", "email": "not-an-email", "subject": "Hi"})
    assert response.status_code == 400
