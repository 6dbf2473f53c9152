"""
Scanner: runs feature extraction then the risk scorer for a single URL and
packages a JSON-ready result for the API and the CLI.
"""

import logging
from typing import List, Mapping, Tuple

from urlrisk.app.heuristics import ScoreResult, score_features
from urlrisk.extract_features import extract_features

logger = logging.getLogger("scanner")

NO_SIGNALS_MESSAGE = "No strong phishing indicators detected."


def format_signals(result: ScoreResult) -> List[str]:
    """Human-readable lines for the matched rules, highest weight first."""
    if not result.reasons:
        return [NO_SIGNALS_MESSAGE]
    return [f"{r.explanation} (+{r.weight})" for r in result.reasons]


def _render_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def feature_rows(features: Mapping) -> List[Tuple[str, str]]:
    """(name, value) pairs for a feature table; the url itself is left out."""
    return [(k, _render_value(v)) for k, v in features.items() if k != "url"]


def scan_url(url: str) -> dict:
    """
    Extract features from `url` and score them.
    Raises InvalidURL when the input cannot be parsed.
    """
    features = extract_features(url)
    result = score_features(features)
    logger.debug("%s -> %s (%d)", features["url"], result.label, result.score)

    packaged = {"url": features["url"], "features": features}
    packaged.update(result.to_dict())
    packaged["signals"] = format_signals(result)
    return packaged
