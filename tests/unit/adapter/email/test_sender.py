"""Unit tests for the HTTP email sender."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from assess.adapter.email import EmailDeliveryError, HttpEmailSender, MockEmailSender
from assess.config import EmailSettings


@pytest.fixture
def settings() -> EmailSettings:
    return EmailSettings(
        api_url="https://mail.example.com/v3/mail/send",
        api_key="secret-key",
        from_address="no-reply@assess.example.com",
        from_name="Assessments",
    )


class TestHttpEmailSender:
    """Tests for HttpEmailSender.send."""

    @pytest.mark.asyncio
    async def test_posts_message_to_api(self, settings):
        """Should post a plain text message with bearer auth."""
        mock_response = MagicMock()
        mock_response.status_code = 202

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            await HttpEmailSender(settings).send("jane@co.com", "Hello", "Body text")

            mock_client.return_value.__aenter__.return_value.post.assert_called_once_with(
                "https://mail.example.com/v3/mail/send",
                json={
                    "personalizations": [{"to": [{"email": "jane@co.com"}]}],
                    "from": {
                        "email": "no-reply@assess.example.com",
                        "name": "Assessments",
                    },
                    "subject": "Hello",
                    "content": [{"type": "text/plain", "value": "Body text"}],
                },
                headers={"Authorization": "Bearer secret-key"},
                timeout=10.0,
            )

    @pytest.mark.asyncio
    async def test_raises_on_error_status(self, settings):
        """Should raise EmailDeliveryError when the API rejects the message."""
        mock_response = MagicMock()
        mock_response.status_code = 400
        mock_response.text = "bad request"

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            with pytest.raises(EmailDeliveryError, match="400"):
                await HttpEmailSender(settings).send("jane@co.com", "Hello", "Body")

    @pytest.mark.asyncio
    async def test_raises_on_transport_error(self, settings):
        """Should wrap httpx errors in EmailDeliveryError."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("Connection refused")
            )

            with pytest.raises(EmailDeliveryError, match="HTTP error"):
                await HttpEmailSender(settings).send("jane@co.com", "Hello", "Body")

    @pytest.mark.asyncio
    async def test_raises_without_api_key(self):
        """Should refuse to send when no API key is configured."""
        with patch("httpx.AsyncClient") as mock_client:
            with pytest.raises(EmailDeliveryError, match="not configured"):
                await HttpEmailSender(EmailSettings()).send("a@x.com", "s", "b")

            mock_client.assert_not_called()


class TestMockEmailSender:
    """Tests for MockEmailSender."""

    @pytest.mark.asyncio
    async def test_records_messages(self):
        sender = MockEmailSender()

        await sender.send("a@x.com", "One", "first")
        await sender.send("b@x.com", "Two", "second")

        assert [m.subject for m in sender.sent] == ["One", "Two"]
        assert [m.body for m in sender.sent_to("b@x.com")] == ["second"]
