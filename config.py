# config.py
# Environment configuration for the tracker proxy

import os

from dotenv import load_dotenv

load_dotenv()

PORT = int(os.environ.get('PORT', '3001'))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# --- Tracker.gg ---
TRACKER_API_BASE = 'https://api.tracker.gg/api/v2/valorant/standard'
USER_AGENT = 'valorant-tracker-app/1.0'
DEFAULT_MATCH_LIMIT = 20


def get_api_key():
    # Read on every call so the key can change without a restart
    return os.environ.get('TRN_API_KEY')


def api_key_configured():
    return bool(get_api_key())
