# tracker_fetcher.py
# Handles fetching Valorant profile and match data from the Tracker.gg API

import logging
from urllib.parse import quote

import requests

import config

logger = logging.getLogger(__name__)

# Shared session for connection reuse across requests
_session = requests.Session()

# Characters left alone by JavaScript's encodeURIComponent besides alphanumerics and -_.~
_UNESCAPED = "!*'()"


class TrackerAPIError(Exception):
    """Raised when the Tracker.gg API answers with a non-2xx status."""

    def __init__(self, status_code, body):
        super().__init__(f"Tracker API error: {status_code}")
        self.status_code = status_code
        self.body = body


def escape_identifier(identifier):
    return quote(identifier, safe=_UNESCAPED)


def _headers():
    return {
        'TRN-Api-Key': config.get_api_key(),
        'Accept': 'application/json',
        'User-Agent': config.USER_AGENT,
    }


def _get(path, identifier):
    url = f'{config.TRACKER_API_BASE}/{path}/riot/{escape_identifier(identifier)}'
    logger.info("Fetching %s: %s", path, url)
    resp = _session.get(url, headers=_headers())
    if not 200 <= resp.status_code < 300:
        logger.error("Tracker API error: %s %s", resp.status_code, resp.text)
        raise TrackerAPIError(resp.status_code, resp.text)
    return resp.json()


def _as_dict(value):
    return value if isinstance(value, dict) else {}


def _stat_value(stats, name):
    return _as_dict(stats.get(name)).get('value') or 0


def format_profile(payload, identifier):
    """
    Reshapes a Tracker.gg profile payload into the client-facing profile.
    Missing fields fall back to defaults; rank is None without a competitive segment.
    """
    data = (payload or {}).get('data') or {}
    platform_info = _as_dict(data.get('platformInfo'))
    metadata = _as_dict(data.get('metadata'))
    segments = data.get('segments') or []
    competitive = next((s for s in segments if s.get('type') == 'competitive'), None)

    rank = None
    if competitive is not None:
        seg_meta = _as_dict(competitive.get('metadata'))
        rank = {
            'name': seg_meta.get('tierName') or 'Unranked',
            'rating': _stat_value(_as_dict(competitive.get('stats')), 'rating'),
            'rankImg': seg_meta.get('imageUrl'),
        }

    return {
        'account': {
            'name': platform_info.get('platformUserHandle') or identifier,
            'level': metadata.get('level') or 'N/A',
            'card': metadata.get('bannerImageUrl') or metadata.get('avatarUrl'),
        },
        'rank': rank,
    }


def format_match(match):
    """Summarises one match from its first segment."""
    segments = match.get('segments') or []
    segment = _as_dict(segments[0] if segments else None)
    stats = _as_dict(segment.get('stats'))
    metadata = _as_dict(segment.get('metadata'))

    return {
        'won': metadata.get('hasWon') or False,
        'map': metadata.get('mapName') or 'Unknown',
        'agent': metadata.get('agentName') or 'Unknown',
        'kills': _stat_value(stats, 'kills'),
        'deaths': _stat_value(stats, 'deaths'),
        'assists': _stat_value(stats, 'assists'),
        'score': _stat_value(stats, 'score'),
        'headshots': _stat_value(stats, 'headshots'),
        'kd': _stat_value(stats, 'kDRatio'),
        'timestamp': (match.get('metadata') or {}).get('timestamp'),
    }


def fetch_profile(identifier):
    """
    Fetches the profile for a Riot handle (e.g. "Name#TAG").
    Raises TrackerAPIError on a non-2xx upstream status.
    """
    payload = _get('profile', identifier)
    return format_profile(payload, identifier)


def fetch_matches(identifier, limit=config.DEFAULT_MATCH_LIMIT):
    """
    Fetches recent matches for a Riot handle, keeping the first `limit` in upstream order.
    Raises TrackerAPIError on a non-2xx upstream status.
    """
    payload = _get('matches', identifier)
    data = (payload or {}).get('data') or {}
    matches = (data.get('matches') or [])[:limit]
    return [format_match(m) for m in matches]
