# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from urllib.parse import quote

import httpx

from user_accounts.domain.users.repositories import AvatarResolver
from user_accounts.shared.logging import logger

PLACEHOLDER_AVATAR = "https://placehold.co/512x512"
GITHUB_AVATAR = "https://github.com/{username}.png"


class StaticAvatarResolver(AvatarResolver):
    def __init__(self, url: str = PLACEHOLDER_AVATAR) -> None:
        self._url = url

    def resolve(self, username: str) -> str:
        return self._url


class GithubAvatarResolver(AvatarResolver):
    """Use the GitHub avatar of the same login when one exists."""

    def __init__(self, *, timeout: float = 5.0, transport: httpx.BaseTransport | None = None) -> None:
        self._timeout = timeout
        self._transport = transport

    def resolve(self, username: str) -> str:
        url = GITHUB_AVATAR.format(username=quote(username, safe=""))
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as http:
                response = http.head(url, follow_redirects=True)
        except httpx.HTTPError as exc:
            logger.warning(f"avatar.resolve: lookup failed for {username}: {type(exc).__name__}")
            return PLACEHOLDER_AVATAR

        if response.status_code == httpx.codes.NOT_FOUND or response.is_error:
            return PLACEHOLDER_AVATAR
        return url
