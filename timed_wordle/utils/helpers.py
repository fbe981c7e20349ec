"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Socket.IO connections only
    }


def parse_letter(value) -> Optional[str]:
    """Return the lowercased letter if value is a single ASCII letter, else None."""
    if not isinstance(value, str) or len(value) != 1:
        return None
    letter = value.lower()
    if not ('a' <= letter <= 'z'):
        return None
    return letter
