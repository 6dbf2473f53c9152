# url_parser.py
"""
Strict absolute-URL parser used by the feature extractor.

Primary function:
    parse_url(raw: str) -> ParsedURL

Raises InvalidURL for anything that is not an absolute URL with a scheme and
a resolvable hostname.

A written port is always kept, including the scheme's default:
https://host:443/ has port "443" and keeps ":443" in href.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

logger = logging.getLogger("url_parser")

SCHEME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:')
# Characters a hostname may never contain
FORBIDDEN_HOST_RE = re.compile(r'[\s<>^|"\\%/?#@\[\]]')
# Schemes whose empty path is canonicalized to "/"
SPECIAL_SCHEMES = {'http', 'https', 'ftp', 'ws', 'wss'}
MAX_PORT = 65535
# ASCII digits only
PORT_RE = re.compile(r'[0-9]+')


class InvalidURL(ValueError):
    """Raised when raw text cannot be parsed as an absolute URL."""

    def __init__(self, raw: str = ''):
        super().__init__('Invalid URL')
        self.raw = raw


@dataclass(frozen=True)
class ParsedURL:
    scheme: str
    host: str
    host_no_www: str
    port: Optional[str]
    path: str
    query: str
    fragment: str
    href: str


def _split_authority(netloc: str, raw: str):
    """Return (host, port) from an authority, keeping the host's case."""
    hostport = netloc.rsplit('@', 1)[-1]
    if hostport.startswith('['):
        end = hostport.find(']')
        if end == -1:
            raise InvalidURL(raw)
        host = hostport[1:end]
        rest = hostport[end + 1:]
        if rest and not rest.startswith(':'):
            raise InvalidURL(raw)
        port = rest[1:] if rest else None
        if not host or not re.fullmatch(r'[0-9A-Fa-f:.]+', host):
            raise InvalidURL(raw)
        return host, port

    host, sep, port = hostport.partition(':')
    if not host or FORBIDDEN_HOST_RE.search(host):
        raise InvalidURL(raw)
    return host, (port if sep else None)


def parse_url(raw: str) -> ParsedURL:
    """Parse trimmed `raw` into a ParsedURL or raise InvalidURL."""
    text = (raw or '').strip()
    if not text or not SCHEME_RE.match(text):
        raise InvalidURL(raw)

    try:
        parts = urlsplit(text)
    except ValueError:
        raise InvalidURL(raw)

    scheme = parts.scheme.lower()
    netloc = parts.netloc
    if not netloc:
        raise InvalidURL(raw)

    host, port = _split_authority(netloc, raw)
    if port is not None:
        # an empty port ("host:") is dropped, as browsers do
        if port == '':
            port = None
            netloc = netloc[:-1]
        elif not PORT_RE.fullmatch(port) or int(port) > MAX_PORT:
            raise InvalidURL(raw)

    path = parts.path
    if not path and scheme in SPECIAL_SCHEMES:
        path = '/'
    query = '?' + parts.query if parts.query else ''
    fragment = '#' + parts.fragment if parts.fragment else ''

    host_no_www = host[4:] if host[:4].lower() == 'www.' else host
    href = f"{scheme}://{netloc}{path}{query}{fragment}"

    logger.debug("Parsed %r -> host=%s port=%s", text, host, port)
    return ParsedURL(
        scheme=scheme,
        host=host,
        host_no_www=host_no_www,
        port=port,
        path=path + query,
        query=query,
        fragment=fragment,
        href=href,
    )
