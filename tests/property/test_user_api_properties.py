"""
Property-based tests for the User API.

For any sequence of valid create requests, the listing reflects every
created user in order, ids are unique, and totals match the user list.
"""
from hypothesis import given, settings, strategies as st
from fastapi.testclient import TestClient
from user_api.config import Settings
from user_api.main import create_app


# ============================================================================
# Hypothesis Strategies
# ============================================================================

non_empty_text = st.text(min_size=1, max_size=40)

user_payload = st.fixed_dictionaries({
    "name": non_empty_text,
    "email": non_empty_text,
})

invalid_payload = st.one_of(
    st.fixed_dictionaries({"name": non_empty_text}),
    st.fixed_dictionaries({"email": non_empty_text}),
    st.fixed_dictionaries({"name": st.just(""), "email": non_empty_text}),
    st.fixed_dictionaries({"name": non_empty_text, "email": st.just("")}),
    st.fixed_dictionaries({
        "name": st.one_of(st.integers(), st.booleans(), st.none()),
        "email": non_empty_text,
    }),
)


def make_client() -> TestClient:
    return TestClient(create_app(Settings(env_name="prop")))


# ============================================================================
# Properties
# ============================================================================

@given(payloads=st.lists(user_payload, min_size=1, max_size=10))
@settings(max_examples=25, deadline=None)
def test_created_users_echo_input_with_unique_ids(payloads):
    client = make_client()
    ids = []

    for payload in payloads:
        response = client.post("/user", json=payload)
        body = response.json()

        assert response.status_code == 201
        assert body["name"] == payload["name"]
        assert body["email"] == payload["email"]
        assert body["env"] == "prop"
        assert body["id"]
        ids.append(body["id"])

    assert len(set(ids)) == len(ids)


@given(payloads=st.lists(user_payload, max_size=10))
@settings(max_examples=25, deadline=None)
def test_listing_preserves_order_and_total(payloads):
    client = make_client()
    for payload in payloads:
        client.post("/user", json=payload)

    body = client.get("/user").json()

    assert body["total"] == len(body["users"]) == len(payloads)
    assert [(u["name"], u["email"]) for u in body["users"]] == [
        (p["name"], p["email"]) for p in payloads
    ]
    assert client.get("/user").json() == body


@given(valid=st.lists(user_payload, max_size=5), invalid=invalid_payload)
@settings(max_examples=25, deadline=None)
def test_invalid_payload_does_not_change_total(valid, invalid):
    client = make_client()
    for payload in valid:
        client.post("/user", json=payload)

    response = client.post("/user", json=invalid)

    assert response.status_code == 400
    assert response.json() == {"error": "Name and email are required."}
    assert client.get("/user").json()["total"] == len(valid)


@given(env_name=non_empty_text)
@settings(max_examples=25, deadline=None)
def test_health_check_contains_environment(env_name):
    client = TestClient(create_app(Settings(env_name=env_name)))

    response = client.get("/")

    assert response.status_code == 200
    assert env_name in response.text
