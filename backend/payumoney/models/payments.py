"""
Pydantic Payment Models

Required-field validation for outbound requests and the redirect
payload handed to the browser.
"""
import re
from typing import Any, Dict

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator

# Same shape PHP is_numeric accepts: ASCII digits, optional sign,
# fraction and exponent, surrounding ASCII whitespace.
NUMERIC_AMOUNT = re.compile(
    r"[ \t\n\r\v\f]*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[ \t\n\r\v\f]*"
)


class PaymentParameters(BaseModel):
    """
    Outbound payment parameters PayU requires before a request is signed.

    Validation only: the gateway keeps hashing and posting the raw
    parameter map, so no value is normalised here. udf1..udf10 and any
    other extra fields pass through untouched.
    """

    key: str
    txnid: str
    amount: str
    productinfo: str
    firstname: str
    email: str
    phone: str
    surl: AnyHttpUrl
    furl: AnyHttpUrl
    service_provider: str

    @field_validator(
        "key", "txnid", "amount", "productinfo", "firstname",
        "email", "phone", "service_provider"
    )
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject empty and whitespace-only values."""
        if not v.strip():
            raise ValueError("Field is required")
        return v

    @field_validator("amount")
    @classmethod
    def amount_numeric(cls, v: str) -> str:
        """Accept plain ASCII decimal or exponent notation only."""
        if not NUMERIC_AMOUNT.fullmatch(v):
            raise ValueError("Amount must be numeric")
        return v

    model_config = {
        "extra": "allow",
        "coerce_numbers_to_str": True,
    }


class PaymentRedirect(BaseModel):
    """
    Everything the browser needs to post the payment form to PayU.
    """

    end_point: str = Field(description="PayU payment URL (sandbox or live)")
    hash: str = Field(
        description="SHA-512 request hash in lowercase hexadecimal",
        pattern="^[0-9a-f]{128}$"
    )
    parameters: Dict[str, Any] = Field(
        description="Signed parameters, posted verbatim as form fields"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "end_point": "https://sandboxsecure.payu.in/_payment",
                "hash": "a1b2c3d4" * 16,
                "parameters": {
                    "key": "gtKFFx",
                    "txnid": "3f9c1a7be2d04c5a9b1e",
                    "amount": "100.00",
                    "productinfo": "Premium plan",
                    "firstname": "Asha",
                    "email": "asha@example.com",
                    "phone": "9999999999",
                    "surl": "https://shop.example.com/api/payumoney/response",
                    "furl": "https://shop.example.com/api/payumoney/response",
                    "service_provider": "payu_paisa"
                }
            }
        }
    }
