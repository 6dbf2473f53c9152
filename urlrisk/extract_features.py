# extract_features.py
"""
Extracts the lexical and structural URL features consumed by the risk scorer.

Primary function:
    extract_features(raw: str) -> dict

Every feature is derived from the parsed URL alone: no network access and no
state shared between calls.
"""

import logging
import math
import re
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP

from urlrisk.url_parser import ParsedURL, parse_url

logger = logging.getLogger("extract_features")

SUSPICIOUS_TLDS = frozenset({
    'zip', 'review', 'country', 'kim', 'cricket', 'science', 'work', 'party',
    'gq', 'cf', 'ml', 'ga', 'tk', 'xyz', 'top', 'loan', 'wang', 'mom', 'date',
    'men', 'click',
})
SHORTENERS = frozenset({
    'bit.ly', 'tinyurl.com', 't.co', 'goo.gl', 'is.gd', 'buff.ly',
    'ow.ly', 'bit.do', 'cutt.ly', 'rebrand.ly', 'shorte.st',
})
BRAND_WORDS = frozenset({
    'login', 'verify', 'secure', 'update', 'reset', 'account', 'wallet',
    'gift', 'promo', 'free', 'prize', 'support', 'invoice', 'signin',
    'mfa', '2fa', 'banking', 'paypal', 'apple', 'google', 'microsoft',
})

IPV4_RE = re.compile(r'^(\d+\.){3}\d+$', re.ASCII)
HEX_COLON_RE = re.compile(r'^[0-9a-f:]+$', re.IGNORECASE)
PUNYCODE_RE = re.compile(r'(^|\.)xn--')


def shannon_entropy(data: str) -> float:
    """Shannon entropy (bits per symbol) over the code points of `data`."""
    if not data:
        return 0.0
    length = len(data)
    entropy = 0.0
    for count in Counter(data).values():
        p = count / length
        entropy -= p * math.log2(p)
    # a single repeated symbol gives -0.0
    return abs(entropy)


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero."""
    return float(Decimal(repr(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


def is_ip_address(host: str) -> bool:
    # Syntactic only: 999.999.999.999 and all-hex labels such as "cafe" match
    return bool(IPV4_RE.match(host) or HEX_COLON_RE.match(host))


def has_punycode(host: str) -> bool:
    return bool(PUNYCODE_RE.search(host))


def top_level_label(host: str) -> str:
    if '.' not in host:
        return ''
    return host.rsplit('.', 1)[1].lower()


def count_subdomains(host: str) -> int:
    if not host:
        return 0
    return max(0, len(host.split('.')) - 2)


def features_from_parsed(parsed: ParsedURL) -> dict:
    host = parsed.host
    path_lower = parsed.path.lower()

    return {
        "url": parsed.href,
        "scheme": parsed.scheme,
        "usesHTTP": parsed.scheme == 'http',
        "length": len(parsed.href),
        "hostnameLength": len(host),
        "pathLength": len(parsed.path),
        "numDots": host.count('.'),
        "numHyphens": host.count('-'),
        "hasAtSymbol": '@' in parsed.href,
        "hasPort": parsed.port is not None,
        "queryLength": len(parsed.query),
        "fragmentLength": len(parsed.fragment),
        "entropyHost": round2(shannon_entropy(parsed.host_no_www)),
        "isIPAddress": is_ip_address(host),
        "hasPunycode": has_punycode(host),
        "suspiciousTLD": top_level_label(host) in SUSPICIOUS_TLDS,
        "isShortener": parsed.host_no_www.lower() in SHORTENERS,
        "brandWordInPath": any(w in path_lower for w in BRAND_WORDS),
        "numDigitsHost": sum(c in '0123456789' for c in host),
        "numSubdomains": count_subdomains(host),
    }


def extract_features(raw: str) -> dict:
    """
    Main feature extraction pipeline.
    Raises InvalidURL when `raw` is not an absolute URL with a hostname.
    """
    parsed = parse_url(raw)
    features = features_from_parsed(parsed)
    logger.debug("Extracted %d features for %s", len(features), parsed.href)
    return features


if __name__ == "__main__":
    print(extract_features("http://192.168.1.1/login"))
