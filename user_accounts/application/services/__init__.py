# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import WerkzeugPasswordHasher
from .reset_tokens import ResetTokenStore
from .token_codec import JwtTokenCodec

__all__ = ["JwtTokenCodec", "ResetTokenStore", "WerkzeugPasswordHasher"]
