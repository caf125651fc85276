"""Notifier adapters - email (SMTP), SMS (HTTP gateway) and Slack."""

import json
import smtplib
from unittest.mock import AsyncMock

import httpx
import pytest
from slack_sdk.errors import SlackApiError

from eventdesk.domain.exceptions import NotificationError
from eventdesk.domain.value_objects import (
    NotificationMessage,
    PhoneNumber,
    Recipient,
    UserEmail,
)
from eventdesk.infrastructure.notifications import (
    EmailNotifier,
    SlackNotifier,
    SmsNotifier,
)
from eventdesk.infrastructure.notifications import email_notifier
from eventdesk.infrastructure.notifications.sms_notifier import MAX_SMS_LENGTH
from fakes import ATTENDEE


def _message(email=ATTENDEE, phone=None, slack_user_id=None, body="See you there"):
    return NotificationMessage(
        recipient=Recipient(
            email=UserEmail(email) if email else None,
            phone=PhoneNumber(phone) if phone else None,
            slack_user_id=slack_user_id,
        ),
        subject="Event cancelled",
        body=body,
    )


# ==================== EMAIL ====================


class FakeSMTP:
    sent = []
    fail_with = None

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        pass

    def login(self, user, password):
        if self.fail_with:
            raise self.fail_with

    def send_message(self, msg):
        FakeSMTP.sent.append(msg)


@pytest.fixture()
def fake_smtp(monkeypatch):
    FakeSMTP.sent = []
    FakeSMTP.fail_with = None
    monkeypatch.setattr(email_notifier.smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


def _email_notifier(user="bot@example.com", password="secret"):
    return EmailNotifier(
        smtp_server="smtp.example.com",
        smtp_port=587,
        smtp_user=user,
        smtp_password=password,
    )


@pytest.mark.asyncio
async def test_email_sends_message(fake_smtp):
    result = await _email_notifier().send(_message())

    assert result.delivered
    (msg,) = fake_smtp.sent
    assert msg["To"] == ATTENDEE
    assert msg["From"] == "bot@example.com"
    assert msg["Subject"] == "Event cancelled"


@pytest.mark.asyncio
async def test_email_skips_recipient_without_address(fake_smtp):
    result = await _email_notifier().send(_message(email=None, phone="+46701234567"))

    assert result.skipped
    assert fake_smtp.sent == []


@pytest.mark.asyncio
async def test_email_without_credentials_fails(fake_smtp):
    result = await _email_notifier(user="", password="").send(_message())

    assert not result.delivered
    assert not result.skipped
    assert "credentials" in result.error


@pytest.mark.asyncio
async def test_email_smtp_error_is_a_failed_result(fake_smtp):
    fake_smtp.fail_with = smtplib.SMTPAuthenticationError(535, b"bad credentials")

    result = await _email_notifier().send(_message())

    assert not result.delivered
    assert fake_smtp.sent == []


# ==================== SMS ====================


def _sms_notifier(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SmsNotifier(
        gateway_url="https://sms.example.com/send", api_key="k3y", client=client
    )


@pytest.mark.asyncio
async def test_sms_posts_to_gateway():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(202, json={"id": "m-1"})

    result = await _sms_notifier(handler).send(_message(phone="+46701234567"))

    assert result.delivered
    (request,) = requests
    assert request.headers["Authorization"] == "Bearer k3y"
    payload = json.loads(request.content)
    assert payload["to"] == "+46701234567"
    assert payload["from"] == "EventDesk"
    assert payload["text"].startswith("Event cancelled")


@pytest.mark.asyncio
async def test_sms_truncates_long_text():
    requests = []

    def handler(request):
        requests.append(json.loads(request.content))
        return httpx.Response(200)

    await _sms_notifier(handler).send(_message(phone="+46701234567", body="x" * 1000))

    assert len(requests[0]["text"]) == MAX_SMS_LENGTH
    assert requests[0]["text"].endswith("...")


@pytest.mark.asyncio
async def test_sms_skips_recipient_without_phone():
    def handler(request):
        pytest.fail("gateway must not be called")

    result = await _sms_notifier(handler).send(_message())

    assert result.skipped


@pytest.mark.asyncio
async def test_sms_gateway_rejection_is_a_failed_result():
    result = await _sms_notifier(lambda request: httpx.Response(503)).send(
        _message(phone="+46701234567")
    )

    assert not result.delivered
    assert result.error == "gateway returned HTTP 503"


@pytest.mark.asyncio
async def test_sms_transport_error_raises_notification_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NotificationError) as exc_info:
        await _sms_notifier(handler).send(_message(phone="+46701234567"))
    assert exc_info.value.channel == "sms"


# ==================== SLACK ====================


def _slack_client(**kwargs):
    client = AsyncMock()
    client.chat_postMessage = AsyncMock(**kwargs)
    return client


@pytest.mark.asyncio
async def test_slack_direct_message_to_user_id():
    client = _slack_client(return_value={"ok": True, "ts": "1.0"})
    notifier = SlackNotifier(token="xoxb", client=client)

    result = await notifier.send(_message(slack_user_id="U123"))

    assert result.delivered
    assert result.details == {"ts": "1.0"}
    kwargs = client.chat_postMessage.await_args.kwargs
    assert kwargs["channel"] == "U123"
    assert kwargs["text"] == "*Event cancelled*\nSee you there"


@pytest.mark.asyncio
async def test_slack_falls_back_to_default_channel():
    client = _slack_client(return_value={"ok": True, "ts": "2.0"})
    notifier = SlackNotifier(token="xoxb", default_channel="#organizers", client=client)

    await notifier.send(_message())

    kwargs = client.chat_postMessage.await_args.kwargs
    assert kwargs["channel"] == "#organizers"
    assert kwargs["text"].endswith(f"_for {ATTENDEE}_")


@pytest.mark.asyncio
async def test_slack_skips_without_target():
    client = _slack_client()
    result = await SlackNotifier(token="xoxb", client=client).send(_message())

    assert result.skipped
    client.chat_postMessage.assert_not_awaited()


@pytest.mark.asyncio
async def test_slack_api_error_is_a_failed_result():
    error = SlackApiError("boom", {"ok": False, "error": "channel_not_found"})
    client = _slack_client(side_effect=error)

    result = await SlackNotifier(token="xoxb", client=client).send(
        _message(slack_user_id="U404")
    )

    assert not result.delivered
    assert result.error == "channel_not_found"
