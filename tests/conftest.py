import pytest

from payumoney.config import Settings
from payumoney.services.hashing import compute_response_hash

MERCHANT_KEY = "gtKFFx"
SALT = "eCwWELxi"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        merchant_key=MERCHANT_KEY,
        salt=SALT,
        auth_header="test-auth-token",
        test_mode=True,
        app_url="https://shop.example.com",
    )


@pytest.fixture
def live_settings(settings):
    return settings.model_copy(update={"test_mode": False})


@pytest.fixture
def payment_fields():
    return {
        "amount": "100.00",
        "productinfo": "Premium plan",
        "firstname": "Asha",
        "email": "asha@example.com",
        "phone": "9999999999",
        "udf1": "order-42",
    }


@pytest.fixture
def signed_response():
    """A response as PayU would post it back, with a valid hash."""
    response = {
        "status": "success",
        "key": MERCHANT_KEY,
        "txnid": "3f9c1a7be2d04c5a9b1e",
        "amount": "100.00",
        "productinfo": "Premium plan",
        "firstname": "Asha",
        "email": "asha@example.com",
        "udf1": "order-42",
        "mihpayid": "403993715521937565",
    }
    response["hash"] = compute_response_hash(response, SALT)
    return response
