"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request

ENTER = 'ENTER'
BACKSPACE = 'BACKSPACE'


def normalize_key(key) -> Optional[str]:
    """
    Maps a key name from either input source to an engine key.

    Physical keyboards send 'Enter', 'Backspace' and single letters in either
    case; the on-screen keyboard sends 'ENTER', 'BACKSPACE' and uppercase
    letters. Returns 'ENTER', 'BACKSPACE', an uppercase letter, or None for
    keys the game ignores.
    """
    if not isinstance(key, str) or not key:
        return None

    upper = key.upper()
    if upper in (ENTER, BACKSPACE):
        return upper
    if len(key) == 1 and 'A' <= upper <= 'Z':
        return upper
    return None


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),
    }
