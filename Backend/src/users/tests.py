import pytest
from django.urls import reverse
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()


@pytest.mark.django_db
def test_register_and_login_and_me():
    client = APIClient()

    # 1) Register
    r = client.post(
        reverse("register"),
        {
            "username": "sari",
            "email": "sari@example.com",
            "password": "StrongPassw0rd!",
            "first_name": "Sari",
            "last_name": "Wijaya",
            "unit_name": "Partnership",
        },
        format="json",
    )
    assert r.status_code == 201, r.content
    assert "password" not in r.data

    # 2) Login (JWT)
    r = client.post(
        reverse("token_obtain_pair"),
        {"username": "sari", "password": "StrongPassw0rd!"},
        format="json",
    )
    assert r.status_code == 200, r.content
    token = r.data["access"]

    # 3) /me
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    r = client.get(reverse("me"))
    assert r.status_code == 200
    assert r.data["username"] == "sari"
    assert r.data["unit_name"] == "Partnership"
    assert r.data["display_name"] == "Sari Wijaya"
    assert r.data["approver"] == {"name": "Sari Wijaya", "email": "sari@example.com", "type": "Internal"}
    assert r.data["documents"] == {"mom": 0, "jik": 0, "nda": 0, "msa": 0, "mou": 0}

    r = client.patch(reverse("me"), {"job_title": "Account Manager"}, format="json")
    assert r.status_code == 200
    assert r.data["job_title"] == "Account Manager"

    # 4) Change password
    r = client.post(
        reverse("change_password"),
        {"old_password": "StrongPassw0rd!", "new_password": "An0therStrongPass!"},
        format="json",
    )
    assert r.status_code == 200
    assert r.data["detail"] == "Mot de passe modifié avec succès."
    assert User.objects.get(username="sari").check_password("An0therStrongPass!")


@pytest.mark.django_db
def test_change_password_rejects_wrong_old_password():
    user = User.objects.create_user(username="budi", password="StrongPassw0rd!")
    client = APIClient()
    client.force_authenticate(user)
    r = client.post(
        reverse("change_password"),
        {"old_password": "nope", "new_password": "An0therStrongPass!"},
        format="json",
    )
    assert r.status_code == 400
    assert "old_password" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_me_requires_authentication():
    r = APIClient().get(reverse("me"))
    assert r.status_code == 401
