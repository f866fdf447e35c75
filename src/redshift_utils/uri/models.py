"""
Parsed storage URI model.

Storage locations handed to the bulk loader look like
``scheme://[access_key:secret_key@]bucket[:port]/path[?query][#fragment]``.
The legacy ``user:pass@`` credential segment is kept as an explicit optional
field so callers never have to re-parse strings to find or drop it.
"""

from dataclasses import dataclass, replace
from typing import Optional
from urllib.parse import urlsplit

from redshift_utils.errors.exceptions import UriParseError


@dataclass(frozen=True)
class Credentials:
    """AWS access key pair embedded in the authority of a URI."""

    access_key: str
    secret_key: Optional[str] = None

    def __repr__(self) -> str:
        secret = "****" if self.secret_key is not None else None
        return f"Credentials(access_key={self.access_key!r}, secret_key={secret!r})"

    def to_userinfo(self) -> str:
        if self.secret_key is None:
            return self.access_key
        return f"{self.access_key}:{self.secret_key}"


@dataclass(frozen=True)
class StorageURI:
    """
    Storage URI split into components.

    ``str(uri)`` rebuilds the original text: scheme, credentials, host, port,
    path, query and fragment round-trip unchanged. Use without_credentials()
    before putting a URI in a log line or exception message.
    """

    scheme: str
    host: str
    path: str = ""
    credentials: Optional[Credentials] = None
    port: Optional[int] = None
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, text: str) -> "StorageURI":
        """
        Parse a URI string.

        Raises:
            UriParseError: If text is not a string, has unbalanced IPv6
                brackets or a non-numeric port
        """
        if not isinstance(text, str):
            raise UriParseError(f"Expected a URI string, got {type(text).__name__}")

        try:
            parts = urlsplit(text)
        except ValueError as e:
            raise UriParseError("Invalid URI authority", uri=text, cause=e) from e

        userinfo, _, hostport = parts.netloc.rpartition("@")
        credentials = None
        if userinfo:
            access_key, sep, secret_key = userinfo.partition(":")
            credentials = Credentials(access_key, secret_key if sep else None)

        host, port = _split_host_port(hostport, text)

        # urlsplit lowercases the scheme; keep the caller's spelling
        scheme = parts.scheme
        start = text.lower().find(f"{scheme}:") if scheme else -1
        if start >= 0:
            scheme = text[start : start + len(scheme)]

        return cls(
            scheme=scheme,
            host=host,
            path=parts.path,
            credentials=credentials,
            port=port,
            query=parts.query,
            fragment=parts.fragment,
        )

    @property
    def authority(self) -> str:
        authority = self.host
        if self.port is not None:
            authority = f"{authority}:{self.port}"
        if self.credentials is not None:
            authority = f"{self.credentials.to_userinfo()}@{authority}"
        return authority

    @property
    def bucket(self) -> str:
        return self.host

    @property
    def key(self) -> str:
        """Object key: the path without its leading slash."""
        return self.path[1:] if self.path.startswith("/") else self.path

    def without_credentials(self) -> "StorageURI":
        if self.credentials is None:
            return self
        return replace(self, credentials=None)

    def with_host(self, host: str) -> "StorageURI":
        return replace(self, host=host)

    def __str__(self) -> str:
        text = ""
        if self.scheme:
            text = f"{self.scheme}://{self.authority}"
        elif self.authority:
            text = f"//{self.authority}"
        text += self.path
        if self.query:
            text += f"?{self.query}"
        if self.fragment:
            text += f"#{self.fragment}"
        return text


def _split_host_port(hostport: str, text: str) -> tuple[str, Optional[int]]:
    # Bracketed IPv6 literals contain colons of their own
    if hostport.startswith("["):
        end = hostport.find("]")
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        if not rest:
            return host, None
        if not rest.startswith(":"):
            raise UriParseError("Invalid characters after IPv6 host", uri=text)
        port_text = rest[1:]
    else:
        host, sep, port_text = hostport.partition(":")
        if not sep:
            return host, None

    if not port_text:
        return host, None
    if not (port_text.isascii() and port_text.isdigit()):
        raise UriParseError("Invalid port", uri=text)
    return host, int(port_text)
