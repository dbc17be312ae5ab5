"""Posting tweets through the v2 API with OAuth 1.0a signing."""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time
from urllib.parse import quote

import httpx

TWEET_URL = "https://api.twitter.com/2/tweets"


class TwitterError(Exception):
    """Raised when the tweet endpoint rejects a request."""


def _percent(value: str) -> str:
    return quote(value, safe="-._~")


def oauth1_header(
    method: str,
    url: str,
    consumer_key: str,
    consumer_secret: str,
    access_token: str,
    access_token_secret: str,
    nonce: str | None = None,
    timestamp: int | None = None,
) -> str:
    """Build an HMAC-SHA1 signed OAuth 1.0a Authorization header value."""
    if nonce is None:
        nonce = secrets.token_hex(16)
    if timestamp is None:
        timestamp = int(time.time())
    params = {
        "oauth_consumer_key": consumer_key,
        "oauth_nonce": nonce,
        "oauth_signature_method": "HMAC-SHA1",
        "oauth_timestamp": str(timestamp),
        "oauth_token": access_token,
        "oauth_version": "1.0",
    }
    param_string = "&".join(
        f"{key}={value}"
        for key, value in sorted((_percent(k), _percent(v)) for k, v in params.items())
    )
    base_string = "&".join((method.upper(), _percent(url), _percent(param_string)))
    signing_key = f"{_percent(consumer_secret)}&{_percent(access_token_secret)}"
    digest = hmac.new(signing_key.encode(), base_string.encode(), hashlib.sha1).digest()
    params["oauth_signature"] = base64.b64encode(digest).decode("ascii")
    return "OAuth " + ", ".join(
        f'{_percent(key)}="{_percent(value)}"' for key, value in sorted(params.items())
    )


async def post_tweet(
    consumer_key: str,
    consumer_secret: str,
    access_token: str,
    access_token_secret: str,
    tweet_text: str,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Post ``tweet_text``; raise TwitterError with the response body on failure."""
    headers = {
        "Authorization": oauth1_header(
            "POST", TWEET_URL, consumer_key, consumer_secret, access_token, access_token_secret
        ),
        "Content-Type": "application/json",
    }
    body = {"text": tweet_text}
    if client is not None:
        response = await client.post(TWEET_URL, headers=headers, json=body)
    else:
        async with httpx.AsyncClient() as own_client:
            response = await own_client.post(TWEET_URL, headers=headers, json=body)
    if not response.is_success:
        raise TwitterError(response.text)