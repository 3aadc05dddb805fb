"""
Authentication helper utilities
Resolve the calling user from a Supabase access token and gate routes by role
"""
from flask import request, current_app, jsonify
from functools import wraps
from typing import Optional, Tuple


def get_user_from_token() -> Tuple[Optional[dict], Optional[str]]:
    """
    Extract user information from the bearer access token

    Returns:
        tuple: (user_data, error_message)
        user_data contains: id, email, role
    """
    auth_header = request.headers.get('Authorization')

    if not auth_header:
        return None, "Authorization header is required"

    parts = auth_header.split(' ')
    if len(parts) != 2 or parts[0] != 'Bearer' or not parts[1]:
        return None, "Invalid authorization header format. Use: Bearer <token>"
    token = parts[1]

    supabase = current_app.supabase_client
    if not supabase:
        return None, "Authentication service not configured"

    try:
        user_response = supabase.auth.get_user(token)

        if not user_response or not user_response.user:
            return None, "Invalid or expired token"

        user = user_response.user

        # app_metadata is only writable with the service role, so prefer it for the role
        app_metadata = getattr(user, 'app_metadata', {}) or {}
        user_metadata = getattr(user, 'user_metadata', {}) or {}
        role = app_metadata.get('role') or user_metadata.get('role') or 'user'

        return {'id': user.id, 'email': user.email, 'role': role}, None

    except Exception as e:
        lowered = str(e).lower()
        if 'invalid' in lowered or 'expired' in lowered:
            return None, "Invalid or expired token"
        return None, "Authentication failed"


def require_role(*allowed_roles):
    """
    Decorator factory that requires the authenticated user to have one of the
    specified roles.

    Usage:
        @require_role('admin')
        def my_view(**kwargs): ...

    Injects 'current_user' into kwargs.
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            user_data, error = get_user_from_token()

            if error:
                return jsonify({'error': error}), 401

            if user_data['role'] not in allowed_roles:
                return jsonify({'error': 'Insufficient permissions'}), 403

            kwargs['current_user'] = user_data
            return f(*args, **kwargs)

        return wrapper
    return decorator
