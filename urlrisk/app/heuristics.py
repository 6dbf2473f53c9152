"""Weighted rule-based scorer for extracted URL features.

Each rule is a (feature, predicate, weight, reason) entry in RULES. Rules are
evaluated in declaration order; matched weights are summed and clamped to
0..100, and the reasons come back sorted by weight (declaration order among
equal weights).

Public functions:
    score_features(features: Mapping) -> ScoreResult
    classify(score: int) -> str
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Tuple, Union

logger = logging.getLogger("heuristics")

LABEL_LOW = "Low risk"
LABEL_MEDIUM = "Medium risk"
LABEL_HIGH = "HIGH risk"

# Tier thresholds (0-100 scale, inclusive lower bounds)
HIGH_THRESHOLD = 55
MEDIUM_THRESHOLD = 30

MIN_SCORE = 0
MAX_SCORE = 100


def _tld_reason(f: Mapping[str, Any]) -> str:
    # Re-derived from the href: last dot segment, cut at the first slash
    tld = f["url"].split(".")[-1].split("/")[0]
    return f"Suspicious TLD .{tld}"


@dataclass(frozen=True)
class Rule:
    feature: str
    predicate: Callable[[Any], bool]
    weight: int
    reason: Union[str, Callable[[Mapping[str, Any]], str]]

    def matches(self, f: Mapping[str, Any]) -> bool:
        return bool(self.predicate(f[self.feature]))

    def explain(self, f: Mapping[str, Any]) -> str:
        return self.reason(f) if callable(self.reason) else self.reason


def _flag(value: Any) -> bool:
    return bool(value)


RULES: Tuple[Rule, ...] = (
    Rule("usesHTTP", _flag, 15, "Uses unsecured HTTP"),
    Rule("isIPAddress", _flag, 20, "Hostname is an IP address"),
    Rule("hasPunycode", _flag, 15, "Punycode hostname (xn--)"),
    Rule("suspiciousTLD", _flag, 15, _tld_reason),
    Rule("isShortener", _flag, 15, "Known URL shortener"),
    Rule("hasAtSymbol", _flag, 12, "Contains @ symbol"),
    Rule("hasPort", _flag, 10, "Non-standard port in URL"),
    Rule("brandWordInPath", _flag, 15, "Impersonation/credential bait keyword"),
    Rule("length", lambda v: v > 80, 10, "Very long URL"),
    Rule("hostnameLength", lambda v: v > 25, 10, "Long hostname"),
    Rule("numDots", lambda v: v >= 3, 10, "Many subdomains"),
    Rule("numHyphens", lambda v: v >= 2, 8, "Multiple hyphens"),
    Rule("numDigitsHost", lambda v: v >= 3, 6, "Many digits in hostname"),
    Rule("entropyHost", lambda v: v > 3.4, 8, "High hostname entropy"),
    Rule("queryLength", lambda v: v > 30, 6, "Long query string"),
)


@dataclass(frozen=True)
class Reason:
    weight: int
    explanation: str


@dataclass(frozen=True)
class ScoreResult:
    score: int
    label: str
    reasons: Tuple[Reason, ...]

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "label": self.label,
            "reasons": [
                {"weight": r.weight, "explanation": r.explanation} for r in self.reasons
            ],
        }


def classify(score: int) -> str:
    if score >= HIGH_THRESHOLD:
        return LABEL_HIGH
    if score >= MEDIUM_THRESHOLD:
        return LABEL_MEDIUM
    return LABEL_LOW


def score_features(features: Mapping[str, Any]) -> ScoreResult:
    """Apply RULES to a feature record and return the clamped score, tier and reasons."""
    total = 0
    matched = []
    for rule in RULES:
        if rule.matches(features):
            total += rule.weight
            matched.append(Reason(rule.weight, rule.explain(features)))

    score = int(max(MIN_SCORE, min(MAX_SCORE, total)))
    # sorted() is stable, so equal weights keep rule order
    reasons = tuple(sorted(matched, key=lambda r: -r.weight))

    logger.debug("Score %d from %d matched rules", score, len(reasons))
    return ScoreResult(score=score, label=classify(score), reasons=reasons)
