# Backend for the Valorant tracker
# Entry point: proxies profile and match queries to Tracker.gg.

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from tracker_fetcher import TrackerAPIError, fetch_matches, fetch_profile

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


def _upstream_error(e):
    return jsonify({'error': str(e), 'details': e.body}), e.status_code


def _internal_error(e):
    return jsonify({'error': 'Internal server error', 'message': str(e)}), 500


def _match_limit():
    limit = request.args.get('limit')
    if not limit:
        return config.DEFAULT_MATCH_LIMIT
    try:
        return int(limit)
    except ValueError:
        # Non-numeric limits truncate to nothing
        return 0


@app.route('/api/profile/<path:identifier>', methods=['GET'])
def get_profile(identifier):
    try:
        profile = fetch_profile(identifier)
    except TrackerAPIError as e:
        return _upstream_error(e)
    except Exception as e:
        logger.exception("Profile fetch error")
        return _internal_error(e)
    return jsonify(profile)


@app.route('/api/matches/<path:identifier>', methods=['GET'])
def get_matches(identifier):
    try:
        matches = fetch_matches(identifier, _match_limit())
    except TrackerAPIError as e:
        return _upstream_error(e)
    except Exception as e:
        logger.exception("Matches fetch error")
        return _internal_error(e)
    return jsonify({'matches': matches})


@app.route('/api/health', methods=['GET'])
def health():
    return jsonify({'status': 'OK', 'apiKeyConfigured': config.api_key_configured()})


if __name__ == '__main__':
    logger.info("Server running on port %s", config.PORT)
    logger.info("API Key configured: %s", config.api_key_configured())
    app.run(host='0.0.0.0', port=config.PORT)
