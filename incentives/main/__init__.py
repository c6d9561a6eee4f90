from flask import Blueprint, current_app
from datetime import datetime

bp = Blueprint('main', __name__)

# Makes 'now' and the locked cohort length available in all templates
@bp.app_context_processor
def inject_globals():
    return {'now': datetime.utcnow(), 'cohort_weeks': current_app.config['COHORT_WEEKS']}

# Import routes and filters at the bottom
from incentives.main import routes, filters
