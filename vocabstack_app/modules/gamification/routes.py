from flask import jsonify
from flask_login import current_user, login_required

from vocabstack_app.utils.time_utils import local_today
from . import gamification_bp
from .interface import get_streak_summary


@gamification_bp.route('/streak', methods=['GET'])
@login_required
def get_streak_api():
    """API lấy chuỗi ngày học của người dùng."""
    return jsonify({
        'success': True,
        'streak': get_streak_summary(current_user.user_id, local_today()),
    })
