"""
Authentication Decorators

Contains decorators that verify bearer tokens on HTTP endpoints. Tokens are
issued by the main Wheels House API; this service only verifies them.
"""

from functools import wraps
from typing import Any, Dict, Optional, Tuple

import jwt
from flask import request, jsonify, current_app


def _decode_bearer_token() -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    """
    Decode the Authorization header.

    Returns:
        (user, None) on success, (None, error message) otherwise
    """
    auth_header = request.headers.get('Authorization')
    if not auth_header or not auth_header.startswith('Bearer '):
        return None, 'Authorization token required'

    secret = current_app.config.get('JWT_SECRET')
    if not secret:
        return None, 'Authentication is not configured'

    token = auth_header.split(' ', 1)[1]
    try:
        payload = jwt.decode(token, secret, algorithms=["HS256"])
    except jwt.ExpiredSignatureError:
        return None, 'Token has expired'
    except jwt.InvalidTokenError:
        return None, 'Invalid token'

    user_id = payload.get('user_id')
    if user_id is None:
        return None, 'Invalid token payload'

    return {'id': str(user_id), 'username': payload.get('username')}, None


def require_auth(f):
    """
    Decorator to require authentication for protected HTTP endpoints.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        user, error = _decode_bearer_token()
        if user is None:
            return jsonify({
                'success': False,
                'error': error
            }), 401

        # Add user data to request context
        request.user = user
        return f(*args, **kwargs)

    return decorated_function


def optional_auth(f):
    """Like require_auth, but a missing or invalid token means an anonymous player."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        user, _ = _decode_bearer_token()
        request.user = user
        return f(*args, **kwargs)

    return decorated_function
