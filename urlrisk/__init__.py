"""urlrisk: lexical phishing-risk scoring for single URLs."""

from urlrisk.url_parser import InvalidURL, ParsedURL, parse_url
from urlrisk.extract_features import extract_features, shannon_entropy
from urlrisk.app.heuristics import ScoreResult, Reason, score_features, classify
from urlrisk.app.scanner import scan_url

__version__ = "1.0.0"

__all__ = [
    "InvalidURL",
    "ParsedURL",
    "parse_url",
    "extract_features",
    "shannon_entropy",
    "ScoreResult",
    "Reason",
    "score_features",
    "classify",
    "scan_url",
]
