import asyncio
import base64
from datetime import UTC, datetime
from email.utils import format_datetime

import pytest
from dynaconf import Dynaconf
from starlette.datastructures import Headers

from authparse.conf import Settings
from authparse.request import AuthorizationRequest
from authparse.types import ASGIReceive, ASGISend, Message
from tests.types import (
    ReceiveFactory,
    RequestFactory,
    SendFactory,
    SettingsFactory,
    SignatureHeaderFactory,
)


@pytest.fixture(scope="session")
def settings_factory() -> SettingsFactory:
    def _get_settings(
        logging: dict | None = None,
        signature: dict | None = None,
    ) -> Settings:
        logging = logging or {
            "debug": True,
            "rich": False,
        }
        signature = signature or {
            "parser": "http-signature",
            "options": {
                "clock_skew": 300,
                "headers": [],
                "strict": False,
            },
        }
        settings = Dynaconf(
            environments=True,
            settings_files=[],
            ENV_FOR_DYNACONF="testing",
            LOGGING=logging,
            SIGNATURE=signature,
        )

        return settings

    return _get_settings


@pytest.fixture()
def http_date() -> str:
    return format_datetime(datetime.now(UTC), usegmt=True)


@pytest.fixture()
def request_factory() -> RequestFactory:
    def _factory(
        authorization: str | None = None,
        headers: dict[str, str] | None = None,
        method: str = "GET",
        target: str = "/",
    ) -> AuthorizationRequest:
        raw_headers = dict(headers or {})
        if authorization is not None:
            raw_headers["authorization"] = authorization
        return AuthorizationRequest(
            method=method,
            target=target,
            headers=Headers(headers=raw_headers),
        )

    return _factory


@pytest.fixture()
def basic_header():
    def _factory(payload: str, scheme: str = "Basic") -> str:
        token = base64.b64encode(payload.encode("utf-8")).decode("ascii")
        return f"{scheme} {token}"

    return _factory


@pytest.fixture()
def signature_header() -> SignatureHeaderFactory:
    def _factory(
        key_id: str = "/alice/keys/primary",
        algorithm: str = "rsa-sha256",
        headers: str | None = "date",
        signature: str = "c2lnbmF0dXJl",
        scheme: str = "Signature",
    ) -> str:
        params = [f'keyId="{key_id}"', f'algorithm="{algorithm}"']
        if headers is not None:
            params.append(f'headers="{headers}"')
        params.append(f'signature="{signature}"')
        return f"{scheme} {','.join(params)}"

    return _factory


@pytest.fixture
def receive_factory() -> ReceiveFactory:
    def _factory(messages: list[Message] | None = None) -> ASGIReceive:
        if not messages:
            messages = [{"type": "http.request", "body": b"", "more_body": False}]

        class Receiver:
            def __init__(self, messages: list[Message]):
                self.messages = messages

            async def __call__(self):
                await asyncio.sleep(0)
                try:
                    return self.messages.pop(0)
                except Exception:
                    return

        return Receiver(messages)

    return _factory


@pytest.fixture
def send_factory() -> SendFactory:
    def _factory(collected: list[Message]) -> ASGISend:
        async def send(message: Message) -> None:
            await asyncio.sleep(0)
            collected.append(message)

        return send

    return _factory
