from __future__ import annotations


class WsseError(ValueError):
    """Base class for input errors raised by wssetoken."""


class DomainError(WsseError):
    """Input unit outside the 0..255 byte range."""


class FormatError(WsseError):
    """Text is not valid RFC 4648 base64."""
