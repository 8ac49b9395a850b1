from flask import jsonify
from flask_login import current_user, login_required

from vocabstack_app.utils.time_utils import local_today
from . import stats_bp
from .interface import get_dashboard_stats


@stats_bp.route('/stats', methods=['GET'])
@login_required
def get_stats_api():
    """API tổng hợp số liệu cho dashboard."""
    return jsonify({
        'success': True,
        'data': get_dashboard_stats(current_user.user_id, local_today()),
    })
