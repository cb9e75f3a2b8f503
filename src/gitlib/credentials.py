"""Credential records and the `git credential` text format.

Git exchanges credentials with helpers as `key=value` lines (see
https://git-scm.com/docs/git-credential). This module converts between that
text and the immutable `Credentials` record.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Serialization order; also the complete set of keys understood when parsing.
CREDENTIAL_KEYS: tuple[str, ...] = (
    "protocol",
    "host",
    "path",
    "username",
    "password",
    "password_expiry_utc",
    "oauth_refresh_token",
    "url",
)


@dataclass(frozen=True)
class Credentials:
    """A sparse credential record.

    None means the field is absent and is not sent to git. An empty string is
    a real value: git uses it to mean "explicitly no credential".

    wwwauth mirrors git's multi-valued `wwwauth[]` attribute. It is never
    serialized and parsing never fills it.
    """

    protocol: str | None = None
    host: str | None = None
    path: str | None = None
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    password_expiry_utc: str | None = None
    oauth_refresh_token: str | None = field(default=None, repr=False)
    url: str | None = None
    wwwauth: tuple[str, ...] | None = None

    @classmethod
    def with_url(cls, url: str) -> Credentials:
        return cls(url=url)

    @classmethod
    def with_url_username_password(cls, url: str, username: str, password: str) -> Credentials:
        """Record for url with the given login.

        Suited to callers that read the fields back. Git itself treats a `url=`
        line as a reset of the fields before it, and url is serialized last,
        so git credential approve/reject drop this username and password.
        """
        return cls(url=url, username=username, password=password)

    def __str__(self) -> str:
        return format_credentials(self)


def format_credentials(credentials: Credentials) -> str:
    """Serialize present fields as `key=value` lines in protocol order."""
    lines = []
    for key in CREDENTIAL_KEYS:
        value = getattr(credentials, key)
        if value is not None:
            lines.append(f"{key}={value}\n")
    return "".join(lines)


def parse_credentials(text: str) -> Credentials:
    """Parse `key=value` lines into a new Credentials record.

    Never fails. Lines without `=` and unknown keys are skipped so newer git
    attributes (e.g. `capability[]`) pass through harmlessly. Only the first
    `=` separates key from value, and a repeated key keeps its last value.
    """
    values: dict[str, str] = {}
    for line in text.split("\n"):
        key, sep, value = line.partition("=")
        if not sep:
            continue
        if key in CREDENTIAL_KEYS:
            values[key] = value
    return Credentials(**values)
