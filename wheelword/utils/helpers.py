"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[Any]]:
    """Extract user identity information from a request for logging."""
    user = getattr(request_obj, 'user', None) or {}

    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'user_id': user.get('id'),
        'username': user.get('username')
    }


def current_user_id(request_obj) -> Optional[str]:
    """The authenticated user's id, or None for an anonymous request."""
    user = getattr(request_obj, 'user', None)
    return user['id'] if user else None
