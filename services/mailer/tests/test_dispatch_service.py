"""Tests for app/services/dispatch_service.py.

Delivery goes to a mocked repository; no provider needed.
"""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.core.exceptions import CredentialEncodingError, DeliveryError
from app.models import OutcomeStatus, Recipient
from app.repository import EmailRepository
from app.services import DispatchService
from app.services.credentials import build_credential

from conftest import make_settings


def _recipients(*emails: str) -> list[Recipient]:
    return [Recipient(email) for email in emails]


def _sent_messages(repository: MagicMock):
    return [call.args[0] for call in repository.send_email.call_args_list]


@pytest.fixture
def service(repository) -> DispatchService:
    return DispatchService(repository=repository, config=make_settings())


# ===========================================================================
# send_batch
# ===========================================================================

class TestSendBatch:
    def test_each_recipient_gets_own_message_and_credential(self, service, repository):
        result = service.send_batch(
            _recipients("a@b.com", "c@d.com", "e@f.com"), "Fest", "Pass", "**hi**", True
        )

        assert result.sent == 3
        messages = _sent_messages(repository)
        assert [m.to for m in messages] == ["a@b.com", "c@d.com", "e@f.com"]
        contents = {m.attachments[0].content for m in messages}
        assert len(contents) == 3
        assert messages[0].attachments[0].content == build_credential("a@b.com", "Fest")
        assert all(m.from_email == "events@example.org" for m in messages)
        assert all("<strong>hi</strong>" in m.html_body for m in messages)

    def test_encoding_failure_skips_only_that_recipient(self, service, repository):
        def fake_credential(email, event_name):
            if email == "bad@b.com":
                raise CredentialEncodingError("Could not encode QR code")
            return "QUJD"

        with patch(
            "app.services.dispatch_service.build_credential", side_effect=fake_credential
        ):
            result = service.send_batch(
                _recipients("a@b.com", "bad@b.com", "c@d.com"), "Fest", "Pass", "hi", False
            )

        assert repository.send_email.call_count == 2
        assert result.sent == 2
        assert result.encoding_failed == 1
        failed = [o for o in result.outcomes if not o.ok]
        assert failed[0].recipient == "bad@b.com"
        assert failed[0].status is OutcomeStatus.ENCODING_FAILED

    def test_delivery_failure_does_not_stop_batch(self, service, repository):
        repository.send_email.side_effect = [
            None,
            DeliveryError("Bad Request", code=400),
            None,
        ]

        result = service.send_batch(
            _recipients("a@b.com", "c@d.com", "e@f.com"), "Fest", "Pass", "hi", False
        )

        assert repository.send_email.call_count == 3
        assert result.sent == 2
        assert result.delivery_failed == 1
        assert result.outcomes[1].status is OutcomeStatus.DELIVERY_FAILED
        assert result.outcomes[1].reason == "Bad Request"

    def test_provider_url_error_does_not_stop_batch(self):
        calls: list[httpx.Request] = []

        def handler(request):
            calls.append(request)
            if len(calls) == 2:
                raise httpx.InvalidURL("Invalid URL")
            return httpx.Response(202)

        config = make_settings()
        service = DispatchService(
            repository=EmailRepository(config, transport=httpx.MockTransport(handler)),
            config=config,
        )

        result = service.send_batch(
            _recipients("a@b.com", "c@d.com", "e@f.com"), "Fest", "Pass", "hi", False
        )

        assert len(calls) == 3
        assert result.sent == 2
        assert result.outcomes[1].status is OutcomeStatus.DELIVERY_FAILED

    def test_empty_batch_sends_nothing(self, service, repository):
        result = service.send_batch([], "Fest", "Pass", "hi", False)

        assert result.outcomes == ()
        repository.send_email.assert_not_called()

    def test_summary_is_logged(self, service, caplog):
        with caplog.at_level("INFO"):
            service.send_batch(_recipients("a@b.com"), "Fest", "Pass", "hi", False)

        assert "1 sent, 0 delivery failures, 0 encoding failures" in caplog.text


# ===========================================================================
# send_direct
# ===========================================================================

class TestSendDirect:
    def test_sends_one_message(self, service, repository):
        service.send_direct("solo@b.com", "Fest", "Pass", "hi", False)

        (message,) = _sent_messages(repository)
        assert message.to == "solo@b.com"
        assert message.html_body == "hi"
        assert message.attachments[0].filename == "qrcode.png"

    def test_delivery_error_propagates(self, service, repository):
        repository.send_email.side_effect = DeliveryError("Bad Request", code=400)

        with pytest.raises(DeliveryError):
            service.send_direct("solo@b.com", "Fest", "Pass", "hi", False)

    def test_encoding_error_aborts_before_delivery(self, service, repository):
        with patch(
            "app.services.dispatch_service.build_credential",
            side_effect=CredentialEncodingError("Could not encode QR code"),
        ):
            with pytest.raises(CredentialEncodingError):
                service.send_direct("solo@b.com", "Fest", "Pass", "hi", False)

        repository.send_email.assert_not_called()

    def test_configured_filename_is_used(self, repository):
        service = DispatchService(
            repository=repository, config=make_settings(CREDENTIAL_FILENAME="pass.png")
        )
        service.send_direct("solo@b.com", "Fest", "Pass", "hi", False)

        assert _sent_messages(repository)[0].attachments[0].filename == "pass.png"


def test_default_repository_shares_config():
    config = make_settings()
    service = DispatchService(config=config)
    assert isinstance(service._repository, EmailRepository)
    assert service._repository._settings is config
