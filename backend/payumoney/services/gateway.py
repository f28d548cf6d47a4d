"""
PayUMoney Gateway

Prepares signed payment requests, checks processor responses and
queries transaction status.

Flow:
    gateway = PayUMoneyGateway(settings)
    redirect = gateway.request({...}).send()      # browser posts to PayU
    ...
    trusted = gateway.response(posted_back_fields)  # raises on tampering
"""
import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

from pydantic import ValidationError

from ..config import Settings
from ..exceptions import (
    ParametersMissingError,
    SignatureMismatchError,
    TransactionIdMissingError,
)
from ..models.payments import PaymentParameters, PaymentRedirect
from .hashing import generate_transaction_id, sign_request, verify_response_hash
from .verification_client import VerificationClient

logger = logging.getLogger(__name__)


class PayUMoneyGateway:
    """
    One payment attempt against PayUMoney.

    Holds per-request state (parameters, hash), so create one instance
    per checkout. The transaction id is generated at construction and
    stays the same unless the caller explicitly overrides it.
    """

    def __init__(self, settings: Settings, client: Optional[VerificationClient] = None):
        self.settings = settings
        self.test_mode = settings.test_mode
        self.merchant_key = settings.merchant_key
        self._salt = settings.salt.get_secret_value()
        self.hash = ""

        self.parameters: Dict[str, Any] = {
            "key": self.merchant_key,
            "txnid": generate_transaction_id(),
            "surl": self._absolute_url(settings.success_url),
            "furl": self._absolute_url(settings.failure_url),
            "service_provider": settings.service_provider,
        }

        self._client = client
        self._owns_client = client is None

    def _absolute_url(self, url: str) -> str:
        # Keeps any path prefix of app_url, like Laravel url()
        if urlsplit(url).scheme or not self.settings.app_url:
            return url
        return self.settings.app_url.rstrip("/") + "/" + url.lstrip("/")

    @property
    def client(self) -> VerificationClient:
        """Status query client, created on first use."""
        if self._client is None:
            self._client = VerificationClient(
                end_point=self.verification_end_point,
                merchant_key=self.merchant_key,
                auth_header=self.settings.auth_header,
                timeout=self.settings.request_timeout,
            )
        return self._client

    def close(self) -> None:
        """Release the HTTP session if this gateway created one."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    @property
    def end_point(self) -> str:
        """Payment form URL for the configured environment."""
        if self.test_mode:
            return self.settings.test_end_point
        return self.settings.live_end_point

    @property
    def verification_end_point(self) -> str:
        """Status query URL for the configured environment."""
        if self.test_mode:
            return self.settings.test_verify_end_point
        return self.settings.live_verify_end_point

    @property
    def txn_id(self) -> str:
        return self.parameters["txnid"]

    def request(self, parameters: Mapping[str, Any]) -> "PayUMoneyGateway":
        """
        Merge caller parameters, validate them and compute the request hash.

        Caller values win over the defaults seeded at construction.

        Raises:
            ParametersMissingError: A required field is absent or invalid
        """
        self.parameters = {**self.parameters, **parameters}

        self.check_parameters(self.parameters)

        self.hash = sign_request(self.parameters, self._salt)

        return self

    def check_parameters(self, parameters: Mapping[str, Any]) -> None:
        """
        Validate required fields before signing.

        Raises:
            ParametersMissingError: Lists every field that failed
        """
        try:
            PaymentParameters.model_validate(dict(parameters))
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            logger.warning(f"Payment request rejected, invalid fields: {fields}")
            raise ParametersMissingError(
                f"Missing or invalid payment parameters: {', '.join(fields)}",
                details={"fields": fields}
            ) from e

    def send(self) -> PaymentRedirect:
        """
        Build the redirect payload for the browser.

        Raises:
            ParametersMissingError: request() has not been called yet
        """
        if not self.hash:
            raise ParametersMissingError(
                "Payment request has not been signed; call request() first",
                details={"txnid": self.txn_id}
            )

        logger.info(f"PayUMoney payment request initiated: txnid={self.txn_id} end_point={self.end_point}")

        return PaymentRedirect(
            end_point=self.end_point,
            hash=self.hash,
            parameters=dict(self.parameters),
        )

    def response(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Check the fields PayU posted back.

        Args:
            data: Form fields from the success/failure redirect

        Returns:
            The response fields, now trusted

        Raises:
            SignatureMismatchError: hash is missing or does not match
        """
        response = dict(data)

        if not verify_response_hash(response, self._salt):
            logger.warning(f"PayUMoney response hash mismatch for txnid {response.get('txnid')}")
            raise SignatureMismatchError(
                "Hash Mismatch Error",
                details={"txnid": response.get("txnid")}
            )

        logger.info(f"PayUMoney response verified: txnid={response.get('txnid')} status={response.get('status')}")
        return response

    def verify(self, parameters: Mapping[str, Any]) -> Any:
        """
        Query PayU for the stored result of a transaction.

        Args:
            parameters: Must contain txnid

        Raises:
            TransactionIdMissingError: txnid absent
            VerificationRequestError: transport failure
        """
        txnid = parameters.get("txnid")
        if not txnid:
            raise TransactionIdMissingError("Transaction id is required for a status query")

        return self.client.get_payment_response(txnid)
