"""
Integration tests for the policy configuration endpoint
"""

import pytest
from django.test import Client

from hsts_filter.exceptions import ConfigPersistenceError
from hsts_filter.policy import Policy
from hsts_filter.registry import get_policy_store

URL = "/hsts/policy/"


@pytest.mark.django_db
class TestPolicyView:
    """Test GET/POST on the policy endpoint"""

    @pytest.fixture
    def client(self):
        return Client()

    @pytest.fixture
    def staff_client(self, client, django_user_model):
        user = django_user_model.objects.create_user(
            username="operator", password="x-Secure-Password-1", is_staff=True
        )
        client.force_login(user)
        return client

    def test_anonymous_forbidden(self, client):
        response = client.get(URL)
        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}

    def test_non_staff_forbidden(self, client, django_user_model):
        user = django_user_model.objects.create_user(username="viewer", password="pw")
        client.force_login(user)
        assert client.get(URL).status_code == 403

    def test_get_current_policy(self, staff_client):
        response = staff_client.get(URL)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["displayName"] == "HSTS Filter"
        assert data["policy"] == {
            "sendHeader": True,
            "maxAge": "31536000",
            "includeSubDomains": True,
        }
        assert data["header"] == "max-age=31536000; includeSubDomains"

    def test_post_json(self, staff_client):
        response = staff_client.post(
            URL,
            data={"sendHeader": True, "maxAge": "600", "includeSubDomains": False},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["status"] == "saved"
        assert response.json()["header"] == "max-age=600"
        assert get_policy_store().current() == Policy(True, 600, False)

    def test_post_form_unchecked_boxes_are_false(self, staff_client):
        response = staff_client.post(URL, {"sendHeader": "on", "maxAge": "900"})

        assert response.status_code == 200
        assert get_policy_store().current() == Policy(True, 900, False)

    def test_post_invalid_max_age(self, staff_client):
        response = staff_client.post(
            URL,
            data={"sendHeader": True, "maxAge": "abc", "includeSubDomains": True},
            content_type="application/json",
        )

        assert response.status_code == 400
        assert "maxAge" in response.json()["details"]
        assert get_policy_store().current() == Policy.default()

    def test_post_malformed_json(self, staff_client):
        response = staff_client.post(URL, data="{oops", content_type="application/json")
        assert response.status_code == 400

    def test_post_json_array(self, staff_client):
        response = staff_client.post(URL, data="[1]", content_type="application/json")
        assert response.status_code == 400

    def test_persistence_failure_is_a_warning(self, staff_client, monkeypatch):
        def fail(document):
            raise ConfigPersistenceError("database is read-only")

        monkeypatch.setattr(get_policy_store().backend, "write", fail)

        response = staff_client.post(
            URL,
            data={"sendHeader": True, "maxAge": "120"},
            content_type="application/json",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "warning"
        assert "could not be saved" in data["message"]
        assert data["header"] == "max-age=120"

    def test_method_not_allowed(self, staff_client):
        assert staff_client.delete(URL).status_code == 405
