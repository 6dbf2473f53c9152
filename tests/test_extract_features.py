import pytest

from urlrisk.extract_features import (
    extract_features,
    is_ip_address,
    round2,
    shannon_entropy,
)
from urlrisk.url_parser import InvalidURL

EXPECTED_KEYS = [
    'url', 'scheme', 'usesHTTP', 'length', 'hostnameLength', 'pathLength',
    'numDots', 'numHyphens', 'hasAtSymbol', 'hasPort', 'queryLength',
    'fragmentLength', 'entropyHost', 'isIPAddress', 'hasPunycode',
    'suspiciousTLD', 'isShortener', 'brandWordInPath', 'numDigitsHost',
    'numSubdomains',
]


def test_extract_features_keys_in_order():
    feats = extract_features("https://example.com/")
    assert list(feats.keys()) == EXPECTED_KEYS


def test_extract_features_plain_https():
    feats = extract_features("https://example.com/")
    assert feats['url'] == "https://example.com/"
    assert feats['scheme'] == "https"
    assert feats['usesHTTP'] is False
    assert feats['length'] == 20
    assert feats['hostnameLength'] == 11
    assert feats['pathLength'] == 1
    assert feats['numDots'] == 1
    assert feats['isIPAddress'] is False
    assert feats['suspiciousTLD'] is False
    assert feats['entropyHost'] == 3.1
    assert feats['numSubdomains'] == 0


def test_extract_features_ip_login():
    feats = extract_features("http://192.168.1.1/login")
    assert feats['usesHTTP'] is True
    assert feats['isIPAddress'] is True
    assert feats['brandWordInPath'] is True
    assert feats['numDigitsHost'] == 8
    assert feats['numDots'] == 3


def test_query_and_fragment_lengths_include_delimiters():
    feats = extract_features("https://example.com/p?ab=1#frag")
    assert feats['queryLength'] == 5
    assert feats['fragmentLength'] == 5
    assert feats['pathLength'] == len("/p?ab=1")


def test_brand_word_search_ignores_fragment_and_host():
    assert extract_features("https://example.com/#login")['brandWordInPath'] is False
    assert extract_features("https://login.example.com/")['brandWordInPath'] is False
    assert extract_features("https://example.com/?next=PayPal")['brandWordInPath'] is True


def test_shortener_after_www_strip():
    assert extract_features("http://www.bit.ly/xyz123")['isShortener'] is True
    assert extract_features("http://TinyURL.com/abc")['isShortener'] is True
    assert extract_features("http://sub.bit.ly/abc")['isShortener'] is False


def test_suspicious_tld_uses_last_host_label():
    assert extract_features("http://evil.XYZ/")['suspiciousTLD'] is True
    assert extract_features("http://xyz.example.com/")['suspiciousTLD'] is False
    assert extract_features("http://localhost/")['suspiciousTLD'] is False


def test_punycode_prefix_is_case_sensitive():
    assert extract_features("http://xn--pple-43d.com/")['hasPunycode'] is True
    assert extract_features("http://mail.xn--80ak6aa92e.com/")['hasPunycode'] is True
    assert extract_features("http://XN--pple-43d.com/")['hasPunycode'] is False
    assert extract_features("http://abcxn--d.com/")['hasPunycode'] is False


def test_port_and_at_symbol():
    feats = extract_features("http://user@example.com:8080/")
    assert feats['hasPort'] is True
    assert feats['hasAtSymbol'] is True


@pytest.mark.parametrize("url,expected", [
    ("http://example.com/", 0),
    ("http://a.example.com/", 1),
    ("http://a.b.example.com/", 2),
    ("http://localhost/", 0),
])
def test_num_subdomains(url, expected):
    assert extract_features(url)['numSubdomains'] == expected


@pytest.mark.parametrize("host,expected", [
    ("192.168.1.1", True),
    ("999.999.999.999", True),
    ("1234.5.6.7", True),
    ("::1", True),
    ("fe80::1", True),
    ("cafe", True),
    ("DEAD:BEEF", True),
    ("1.2.3", False),
    ("example.com", False),
    ("192.168.1.1.example.com", False),
])
def test_is_ip_address(host, expected):
    assert is_ip_address(host) is expected


def test_entropy_of_empty_string_is_zero():
    assert shannon_entropy("") == 0.0


@pytest.mark.parametrize("data,expected", [
    ("aaaa", 0.0),
    ("ab", 1.0),
    ("abcd", 2.0),
    ("日本", 1.0),
    ("ééé", 0.0),
])
def test_entropy_known_values(data, expected):
    assert shannon_entropy(data) == pytest.approx(expected)


@pytest.mark.parametrize("data", ["x", "google.com", "a1b2c3d4e5", "xn--80ak6aa92e", "-.-.-"])
def test_entropy_is_non_negative(data):
    assert shannon_entropy(data) >= 0


def test_round2_rounds_half_away_from_zero():
    assert round2(2.675) == 2.68
    assert round2(0.125) == 0.13
    assert round2(3.0957) == 3.1


def test_extract_is_deterministic():
    url = "http://secure-update.example.tk:8080/login?session=abc#x"
    assert extract_features(url) == extract_features(url)


@pytest.mark.parametrize("raw", ["", "   ", "not a url", "ftp://"])
def test_extract_rejects_malformed(raw):
    with pytest.raises(InvalidURL):
        extract_features(raw)


def test_written_default_port_counts_as_port():
    feats = extract_features("https://example.com:443/")
    assert feats['hasPort'] is True
    assert feats['url'] == "https://example.com:443/"


@pytest.mark.parametrize("raw", ["http://example.com:²/", "http://example.com:٨٠/"])
def test_non_ascii_port_digits_are_rejected(raw):
    with pytest.raises(InvalidURL):
        extract_features(raw)
