"""WSSE UsernameToken generation.

    X-WSSE: UsernameToken Username="name", PasswordDigest="digest", Created="timestamp", Nonce="nonce"

  * Nonce: a token generated anew for each request, the base64 SHA-1 of the
    creation time, a salt string and the epoch milliseconds.
  * Created: ISO 8601 timestamp marking when the nonce was created.
  * PasswordDigest: base64(sha1(Nonce . Created . Password)).

The nonce placed in the header is base64-encoded a second time. Servers that
accept this scheme compare against that form, so it is kept as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from . import base64codec
from .config import DEFAULT_CONFIG, Sha1Config
from .isodate import isodatetime, local_now
from .sha1 import sha1_base64

X_WSSE = "X-WSSE"
NONCE_SALT = "There is more than words"
HEADER_TEMPLATE = (
    'UsernameToken Username="{username}", PasswordDigest="{digest}", '
    'Created="{created}", Nonce="{nonce}"'
)


@dataclass(frozen=True)
class WsseToken:
    nonce: str
    created: str
    password_digest: str

    def header(self, username: str) -> str:
        return HEADER_TEMPLATE.format(
            username=username,
            digest=self.password_digest,
            created=self.created,
            nonce=self.nonce,
        )


def make_nonce(created: str, epoch_millis: int, salt: str = NONCE_SALT, config: Sha1Config = DEFAULT_CONFIG) -> str:
    return sha1_base64(f"{created}{salt}{epoch_millis}", config)


def password_digest(nonce: str, created: str, password: str, config: Sha1Config = DEFAULT_CONFIG) -> str:
    return sha1_base64(nonce + created + password, config)


def wsse(
    password: str,
    now: Optional[datetime] = None,
    salt: str = NONCE_SALT,
    config: Sha1Config = DEFAULT_CONFIG,
) -> WsseToken:
    moment = local_now() if now is None else now
    created = isodatetime(moment)
    nonce = make_nonce(created, int(moment.timestamp() * 1000), salt, config)
    digest = password_digest(nonce, created, password, config)
    return WsseToken(
        nonce=base64codec.encode(nonce),
        created=created,
        password_digest=digest,
    )


def wsse_header(
    username: str,
    password: str,
    now: Optional[datetime] = None,
    salt: str = NONCE_SALT,
    config: Sha1Config = DEFAULT_CONFIG,
) -> str:
    return wsse(password, now=now, salt=salt, config=config).header(username)
