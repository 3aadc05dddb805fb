"""
Admin password reset API
Overwrites a user's password and emails them the new one.
"""
import re

import structlog
from flask import Blueprint, request, jsonify, current_app

from utils.auth_helpers import require_role
from utils.password_reset_service import USER_NOT_FOUND, UPDATE_FAILED


admin_bp = Blueprint('admin', __name__)
logger = structlog.get_logger(__name__)

# Failures share one client-facing message so responses do not reveal which accounts exist
RESET_FAILED = 'Password reset failed'


def validate_email(email):
    """Validate email format"""
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return re.match(pattern, email) is not None


@admin_bp.route('/reset-password', methods=['POST'])
@require_role('admin')
def reset_password(**kwargs):
    """Reset the password of the account with the given email"""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body is required'}), 400

    email = (data.get('email') or '').strip()
    if not email:
        return jsonify({'error': 'Email is required'}), 400
    if not validate_email(email):
        return jsonify({'error': 'Invalid email format'}), 400

    service = getattr(current_app, 'password_reset_service', None)
    if not service:
        return jsonify({'error': 'Password reset service not configured'}), 500

    admin = kwargs.get('current_user') or {}
    result = service.reset_password_by_email(email)
    logger.info(
        "admin_password_reset",
        admin_id=admin.get('id'),
        success=result.success,
        reason=None if result.success else result.message,
    )

    if result.success:
        return jsonify({'message': result.message}), 200
    if result.message in (USER_NOT_FOUND, UPDATE_FAILED):
        return jsonify({'error': RESET_FAILED}), 400
    return jsonify({'error': RESET_FAILED}), 500
