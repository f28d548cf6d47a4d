"""
PayUMoney Configuration Module

Loads merchant credentials and endpoint URLs from environment variables.
Values are read once and handed to the gateway explicitly; no component
reaches for global configuration on its own.
"""
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


LIVE_END_POINT = "https://secure.payu.in/_payment"
TEST_END_POINT = "https://sandboxsecure.payu.in/_payment"
LIVE_VERIFY_END_POINT = "https://www.payumoney.com/payment/op/getPaymentResponse"
TEST_VERIFY_END_POINT = "https://www.payumoney.com/sandbox/payment/op/getPaymentResponse"


class Settings(BaseSettings):
    """
    Gateway settings loaded from ``PAYUMONEY_*`` environment variables.

    Security Notes:
    - The salt is a SecretStr so it never shows up in reprs or logs
    - The salt is never sent to the processor, only mixed into hashes
    - test_mode selects the sandbox endpoints for both payment and verification
    """

    # Merchant credentials
    merchant_key: str = ""
    salt: SecretStr = SecretStr("")
    auth_header: str = ""

    # Environment
    test_mode: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Redirect targets (relative paths are resolved against app_url)
    app_url: str = ""
    success_url: str = "/api/payumoney/response"
    failure_url: str = "/api/payumoney/response"
    service_provider: str = "payu_paisa"

    # Endpoints
    live_end_point: str = LIVE_END_POINT
    test_end_point: str = TEST_END_POINT
    live_verify_end_point: str = LIVE_VERIFY_END_POINT
    test_verify_end_point: str = TEST_VERIFY_END_POINT

    # Status query transport
    request_timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="PAYUMONEY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (overridable as a FastAPI dependency)."""
    return Settings()
