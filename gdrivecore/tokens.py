"""OAuth tokens and their storage on disk."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

_ZERO_TIME_TEXT = "0001-01-01T00:00:00Z"

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?"
    r"([Zz]|[+-]\d{2}:\d{2})"
)


class TokenError(Exception):
    """A token could not be read, parsed or saved."""


def _format_time(t: Optional[datetime]) -> str:
    if t is None:
        return _ZERO_TIME_TEXT
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    text = f"{t.year:04d}-{t.month:02d}-{t.day:02d}T{t:%H:%M:%S}"
    if t.microsecond:
        text += "." + f"{t.microsecond:06d}".rstrip("0")
    offset = t.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return text + f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(text: str) -> Optional[datetime]:
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise TokenError(f"cannot parse {text!r} as a time")
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7)
    micro = int(fraction[1:7].ljust(6, "0")) if fraction else 0
    zone = match.group(8)
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    try:
        parsed = datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)
    except ValueError as exc:
        raise TokenError(f"cannot parse {text!r} as a time: {exc}") from exc
    if parsed == datetime(1, 1, 1, tzinfo=timezone.utc):
        return None
    return parsed


@dataclass
class Token:
    """An OAuth2 token; ``expiry`` of None means the token carries no expiry."""

    access_token: str = ""
    token_type: str = ""
    refresh_token: str = ""
    expiry: Optional[datetime] = None

    def to_json(self) -> str:
        """The token as compact JSON."""
        data: dict[str, str] = {"access_token": self.access_token}
        if self.token_type:
            data["token_type"] = self.token_type
        if self.refresh_token:
            data["refresh_token"] = self.refresh_token
        data["expiry"] = _format_time(self.expiry)
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, data: str | bytes) -> Token:
        """Parse a token from JSON; raises :class:`TokenError` if it is not one."""
        try:
            raw = json.loads(data)
        except (ValueError, UnicodeDecodeError) as exc:
            raise TokenError(str(exc)) from exc
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise TokenError("token JSON is not an object")
        fields: dict[str, str] = {}
        for key in ("access_token", "token_type", "refresh_token", "expiry"):
            value = raw.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise TokenError(f"token field {key} is not a string")
            fields[key] = value
        expiry_text = fields.pop("expiry", None)
        expiry = _parse_time(expiry_text) if expiry_text is not None else None
        return cls(expiry=expiry, **fields)


class TokenSource(Protocol):
    """Something that hands out tokens."""

    def token(self) -> Token:
        """A current token."""


def token_path(config_dir: str | os.PathLike[str], name: str) -> str:
    """Path of the token file for remote ``name``."""
    return os.path.join(os.fspath(config_dir), name + ".token")


def load_token(config_dir: str | os.PathLike[str], name: str) -> Token:
    """Read the token of remote ``name`` from ``config_dir``."""
    path = token_path(config_dir, name)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise TokenError(f"failed to read token file: {exc}") from exc
    try:
        return Token.from_json(data)
    except TokenError as exc:
        raise TokenError(f"failed to parse token file: {exc}") from exc


def save_token(config_dir: str | os.PathLike[str], name: str, token: Token) -> None:
    """Write the token of remote ``name`` into ``config_dir``, readable by the owner only."""
    try:
        os.makedirs(config_dir, mode=0o700, exist_ok=True)
    except OSError as exc:
        raise TokenError(f"failed to create config directory: {exc}") from exc
    path = token_path(config_dir, name)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(token.to_json())
    except OSError as exc:
        raise TokenError(f"failed to save token file: {exc}") from exc


class PersistentTokenSource:
    """A token source that saves every token it hands out."""

    def __init__(
        self, config_dir: str | os.PathLike[str], name: str, wrapped: TokenSource
    ) -> None:
        self._config_dir = config_dir
        self._name = name
        self._wrapped = wrapped

    def token(self) -> Token:
        """A token from the wrapped source, saved to disk on the way."""
        token = self._wrapped.token()
        try:
            save_token(self._config_dir, self._name, token)
        except TokenError as exc:
            print(f"Warning: failed to save token: {exc}")
        return token