"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Set for Socket.IO events
    }


def get_json_payload(request_obj=None) -> Optional[Dict]:
    """
    Return the request's JSON body as a dict.

    An empty body gives {}; a body that is not a JSON object gives None.
    """
    if request_obj is None:
        request_obj = request

    if not request_obj.get_data():
        return {}

    data = request_obj.get_json(silent=True)
    return data if isinstance(data, dict) else None
