from __future__ import annotations

import logging
import os
import re
import sys
import time
import warnings
from typing import Mapping, NamedTuple, TextIO

import jwt

logger = logging.getLogger(__name__)

AUDIENCE = "/admin/"
TOKEN_TTL = 5 * 60  # 5 minutes
ALGORITHM = "HS256"

ENV_VAR = "GHOST_ADMIN_API_KEY"
EXPECTED_FORMAT = "id:secret"

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


class CredentialError(ValueError):
    pass


class FormatError(CredentialError):
    pass


class EncodingError(CredentialError):
    pass


class Credential(NamedTuple):
    key_id: str
    secret: bytes


class Claims(NamedTuple):
    iat: int
    exp: int
    aud: str

    def as_payload(self) -> dict[str, int | str]:
        return {"iat": self.iat, "exp": self.exp, "aud": self.aud}


def read_credential(
    environ: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
    env_var: str = ENV_VAR,
) -> str:
    """Return the raw credential, preferring the environment over stdin."""
    if environ is None:
        environ = os.environ

    value = environ.get(env_var, "").strip()
    if value:
        logger.debug("Credential is read from env %s", env_var)
        return value

    if stdin is None:
        stdin = sys.stdin

    logger.debug("Env %s is not set : read credential from stdin", env_var)
    return stdin.read().strip()


def parse_credential(raw: str) -> Credential:
    # the secret is everything after the first colon
    key_id, sep, secret_hex = raw.partition(":")
    if not sep:
        raise FormatError(f"Expected credential in format {EXPECTED_FORMAT}")

    message = f"Secret of credential is not valid hex (expected format {EXPECTED_FORMAT})"

    # bytes.fromhex skips whitespace between bytes
    if _HEX_RE.fullmatch(secret_hex) is None:
        raise EncodingError(message)

    try:
        secret = bytes.fromhex(secret_hex)
    except ValueError as err:
        raise EncodingError(message) from err

    return Credential(key_id=key_id, secret=secret)


def make_claims(now: float | None = None) -> Claims:
    if now is None:
        now = time.time()

    iat = int(now)
    return Claims(iat=iat, exp=iat + TOKEN_TTL, aud=AUDIENCE)


def issue(credential: str, now: float | None = None) -> str:
    """Sign a short-lived admin token for the given ``id:secret`` credential.

    The hex secret is decoded and the raw bytes are used as the HMAC key. The
    identifier is carried in the header as ``kid``.
    """
    cred = parse_credential(credential)
    claims = make_claims(now)

    # key length is fixed by the issued Admin API key, not chosen here
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=r"The HMAC key is \d+ bytes long")
        token = jwt.encode(
            claims.as_payload(),
            cred.secret,
            algorithm=ALGORITHM,
            headers={"kid": cred.key_id},
        )

    logger.debug(
        "Token is issued for kid %s (iat: %d, exp: %d)",
        cred.key_id,
        claims.iat,
        claims.exp,
    )
    return token
