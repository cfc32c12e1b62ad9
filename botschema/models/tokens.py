"""OAuth token, token-exchange and sign-in payloads."""

from __future__ import annotations

from typing import Any

from ._base import SchemaModel
from .conversation_reference import ConversationReference


class TokenRequest(SchemaModel):
    provider: str | None = None
    settings: dict[str, Any] | None = None


class TokenResponse(SchemaModel):
    """User token issued for a connection; ``expiration`` is ISO 8601 text."""

    channel_id: str | None = None
    connection_name: str | None = None
    token: str | None = None
    expiration: str | None = None


class TokenStatus(SchemaModel):
    channel_id: str | None = None
    connection_name: str | None = None
    has_token: bool | None = None
    service_provider_display_name: str | None = None


class TokenExchangeState(SchemaModel):
    """State round-tripped through the token service during an exchange."""

    connection_name: str | None = None
    conversation: ConversationReference | None = None
    relates_to: ConversationReference | None = None
    bot_url: str | None = None
    ms_app_id: str | None = None


class TokenExchangeRequest(SchemaModel):
    uri: str | None = None
    token: str | None = None


class TokenExchangeInvokeRequest(SchemaModel):
    """Value of a ``signin/tokenExchange`` invoke activity."""

    id: str | None = None
    connection_name: str | None = None
    token: str | None = None


class TokenExchangeInvokeResponse(SchemaModel):
    id: str | None = None
    connection_name: str | None = None
    failure_detail: str | None = None


class TokenExchangeResource(SchemaModel):
    id: str | None = None
    uri: str | None = None
    provider_id: str | None = None


class TokenPostResource(SchemaModel):
    sas_url: str | None = None


class SignInResource(SchemaModel):
    sign_in_link: str | None = None
    token_exchange_resource: TokenExchangeResource | None = None
    token_post_resource: TokenPostResource | None = None


class TokenOrSignInResourceResponse(SchemaModel):
    token_response: TokenResponse | None = None
    sign_in_resource: SignInResource | None = None


class AadResourceUrls(SchemaModel):
    resource_urls: list[str] | None = None
