from unittest.mock import Mock

import pytest
import requests

from payumoney.exceptions import TransactionIdMissingError, VerificationRequestError
from payumoney.services.verification_client import VerificationClient

END_POINT = "https://www.payumoney.com/sandbox/payment/op/getPaymentResponse"


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    response = Mock(spec=requests.Response)
    response.status_code = 200
    response.json.return_value = {"status": 0, "message": "Success", "result": []}
    session.post.return_value = response
    return session


@pytest.fixture
def client(session):
    return VerificationClient(
        end_point=END_POINT,
        merchant_key="gtKFFx",
        auth_header="test-auth-token",
        timeout=5.0,
        session=session,
    )


def test_request_shape(client, session):
    result = client.get_payment_response("abc123")

    assert result == {"status": 0, "message": "Success", "result": []}
    session.post.assert_called_once_with(
        END_POINT,
        params={"merchantKey": "gtKFFx", "merchantTransactionIds": "abc123"},
        headers={
            "authorization": "test-auth-token",
            "cache-control": "no-cache",
            "Content-Type": "application/json",
        },
        timeout=5.0,
    )


@pytest.mark.parametrize("txnid", [None, ""])
def test_missing_txnid_makes_no_request(client, session, txnid):
    with pytest.raises(TransactionIdMissingError):
        client.get_payment_response(txnid)
    session.post.assert_not_called()


def test_connection_error_is_wrapped(client, session):
    session.post.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(VerificationRequestError) as exc_info:
        client.get_payment_response("abc123")

    assert exc_info.value.status_code == 502
    assert exc_info.value.details == {"txnid": "abc123", "end_point": END_POINT}


def test_timeout_is_wrapped(client, session):
    session.post.side_effect = requests.Timeout("read timed out")
    with pytest.raises(VerificationRequestError):
        client.get_payment_response("abc123")


def test_http_error_status_is_wrapped(client, session):
    session.post.return_value.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
    with pytest.raises(VerificationRequestError):
        client.get_payment_response("abc123")


def test_non_json_body_is_wrapped(client, session):
    session.post.return_value.json.side_effect = ValueError("Expecting value")

    with pytest.raises(VerificationRequestError) as exc_info:
        client.get_payment_response("abc123")

    assert exc_info.value.details["status_code"] == 200


def test_default_session_is_created():
    client = VerificationClient(END_POINT, "gtKFFx", "token")
    assert isinstance(client.session, requests.Session)
    assert client.timeout == 30.0


def test_close_keeps_caller_session_open(client, session):
    client.close()
    session.close.assert_not_called()


def test_close_closes_own_session():
    client = VerificationClient(END_POINT, "gtKFFx", "token")
    client.session.close = Mock()

    client.close()

    client.session.close.assert_called_once_with()
