import pytest
from django.core.cache import cache


def char_measure(text, font="Helvetica", size=10):
    """Deterministic stand-in for font metrics: every character is half the font size wide."""
    return len(text or "") * size * 0.5


@pytest.fixture
def measure():
    return char_measure


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="desk", password="desk-pass-123")


@pytest.fixture
def api_client(user):
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def shipment_payload():
    return {
        "sender_name": "Acme Printing",
        "sender_contact": "011 555 0101",
        "sender_address": "12 Main Road, Randburg",
        "recipient_name": "Blue Retail",
        "recipient_contact": "021 555 0199",
        "recipient_address": "4 Long Street, Cape Town",
        "associated_job_no": "J-2041",
        "ce_number": "CE-77",
        "courier_charge": "350",
        "elements": [
            {"description": "Pull-up banner", "quantity": "2"},
            {"description": "Flyers A5", "quantity": "1 box"},
        ],
    }


@pytest.fixture
def delivery_note_payload():
    return {
        "client_name": "Blue Retail",
        "date": "2024-03-15",
        "address": "4 Long Street, Cape Town",
        "contact_person": "Thandi",
        "contact_number": "021 555 0199",
        "job_no": "J-2041",
        "ce_number": "CE-77",
        "items": [
            {"quantity": 2, "description": "Pull-up banner", "price": 100},
            {"quantity": 1, "description": "Flyers A5", "price": 50},
        ],
    }
