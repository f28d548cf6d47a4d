"""
PayUMoney Status Query Client

Asks PayU for the stored payment response of a transaction.

Request shape:
    POST <verify-endpoint>?merchantKey=<key>&merchantTransactionIds=<txnid>
    authorization: <auth header>
    cache-control: no-cache
    Content-Type: application/json
"""
import logging
from typing import Any, Optional

import requests

from ..exceptions import TransactionIdMissingError, VerificationRequestError

logger = logging.getLogger(__name__)


class VerificationClient:
    """
    Thin wrapper around requests for the getPaymentResponse API.

    Does not retry; a failed call raises VerificationRequestError and the
    caller decides whether to try again.
    """

    def __init__(
        self,
        end_point: str,
        merchant_key: str,
        auth_header: str,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None
    ):
        self.end_point = end_point
        self.merchant_key = merchant_key
        self.auth_header = auth_header
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the underlying session unless it was supplied by the caller."""
        if self._owns_session:
            self.session.close()

    def get_payment_response(self, txnid: Optional[str]) -> Any:
        """
        Fetch the processor's view of a transaction.

        Args:
            txnid: Merchant transaction id

        Returns:
            Parsed JSON body as returned by PayU

        Raises:
            TransactionIdMissingError: txnid is empty or None
            VerificationRequestError: transport error, non-2xx status,
                or a body that is not JSON
        """
        if not txnid:
            raise TransactionIdMissingError("Transaction id is required for a status query")

        params = {
            "merchantKey": self.merchant_key,
            "merchantTransactionIds": txnid,
        }
        headers = {
            "authorization": self.auth_header,
            "cache-control": "no-cache",
            "Content-Type": "application/json",
        }

        logger.info(f"Querying PayU payment status for txnid {txnid}")

        try:
            response = self.session.post(
                self.end_point,
                params=params,
                headers=headers,
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"PayU status query failed for txnid {txnid}: {e}")
            raise VerificationRequestError(
                f"Status query failed: {e}",
                details={"txnid": txnid, "end_point": self.end_point}
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"PayU status query for txnid {txnid} returned non-JSON body")
            raise VerificationRequestError(
                "Status query returned a non-JSON body",
                details={"txnid": txnid, "status_code": response.status_code}
            ) from e
