"""Flask API for urlrisk.

Run: python -m urlrisk.api
"""

import logging
from flask import Flask, request, jsonify, abort
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import redis as redis_lib

from urlrisk import __version__, config
from urlrisk.app.heuristics import RULES
from urlrisk.app.scanner import scan_url
from urlrisk.url_parser import InvalidURL

# Logging
logging.basicConfig(level=config.log_level())
logger = logging.getLogger("api")

# Flask app
app = Flask(__name__)

# Rate limiter: prefer Redis storage in production when REDIS_URL is set
if config.REDIS_URL:
    try:
        # raises ValueError on an unsupported URL scheme
        redis_lib.from_url(config.REDIS_URL)
        limiter = Limiter(app=app, key_func=get_remote_address,
                          default_limits=[config.DEFAULT_RATE_LIMIT],
                          storage_uri=config.REDIS_URL)
        logger.info("Using Redis at %s for rate limiting", config.REDIS_URL)
    except ValueError:
        logger.exception("Invalid REDIS_URL, falling back to in-memory limiter")
        limiter = Limiter(app=app, key_func=get_remote_address,
                          default_limits=[config.DEFAULT_RATE_LIMIT])
else:
    limiter = Limiter(app=app, key_func=get_remote_address,
                      default_limits=[config.DEFAULT_RATE_LIMIT])

if config.API_KEY:
    logger.info("API key enabled")


def require_api_key() -> None:
    if not config.API_KEY:
        return
    key = request.headers.get("X-API-Key") or request.args.get("api_key")
    if not key or key != config.API_KEY:
        abort(401, description="Invalid or missing API key")


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "version": __version__})


@app.route("/rules", methods=["GET"])
def rules():
    require_api_key()
    rows = []
    for rule in RULES:
        # the TLD reason is only known once a URL is scored
        reason = "Suspicious TLD .<tld>" if callable(rule.reason) else rule.reason
        rows.append({"feature": rule.feature, "weight": rule.weight, "reason": reason})
    return jsonify({"count": len(rows), "rules": rows})


@app.route("/check", methods=["POST"])
@limiter.limit(lambda: config.CHECK_RATE_LIMIT)
def check():
    require_api_key()
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "url" not in data:
        return jsonify({"error": "missing 'url' in JSON body"}), 400
    if not isinstance(data["url"], str):
        return jsonify({"error": "'url' must be a string"}), 400

    url = data["url"].strip()
    if not url:
        return jsonify({"error": "empty url"}), 400

    try:
        result = scan_url(url)
    except InvalidURL as e:
        logger.info("Rejected input %r: %s", url, e)
        return jsonify({"error": str(e)}), 422
    except Exception as e:
        logger.exception("Scanner failed: %s", e)
        return jsonify({"error": "scan_failed"}), 500

    return jsonify(result), 200


if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT, debug=False)
