# ==============================================================================
# incentives/main/routes.py
# ------------------------------------------------------------------------------
# Defines all user-facing routes for the main application blueprint:
# the two calculator pages and their JSON counterparts.
# ==============================================================================

from flask import render_template, request, flash, redirect, url_for, current_app, jsonify

from incentives.main import bp
from incentives.calculator import calculate_ic_incentive, calculate_manager_incentive
from incentives.main.forms import ICIncentiveApiForm, ICIncentiveForm, ManagerIncentiveApiForm, ManagerIncentiveForm
from incentives.main.utils import ic_breakdown_rows, manager_breakdown_rows

# --- Helper Functions ---

def _run_form(form, calculate, breakdown, template):
    """Validates a submitted calculator form and renders the page with its result."""
    result, rows = None, []
    if form.validate_on_submit():
        calculator_input = form.to_input(current_app.config['COHORT_WEEKS'])
        try:
            result = calculate(calculator_input)
            rows = breakdown(calculator_input, result)
        except Exception as e:
            current_app.logger.error(f"Incentive calculation failed for {calculator_input}: {e}", exc_info=True)
            flash(f'An unexpected error occurred during the calculation. Please check the server log. Error: {e}', 'danger')
        else:
            current_app.logger.info(f"Calculated {template.split('.')[0]} incentive: eligible={result.eligible}")
    elif request.method == 'POST':
        flash('Please correct the highlighted fields.', 'danger')
    return render_template(template, form=form, result=result, breakdown=rows)


def _run_api(form_class, calculate):
    """Validates a JSON payload through the API form and returns the result as JSON."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({'errors': [{'field': None, 'message': 'Request body must be a JSON object.'}]}), 400

    form = form_class()
    if not form.validate():
        errors = form.error_list()
        current_app.logger.info(f"Rejected incentive request with {len(errors)} validation error(s).")
        return jsonify({'errors': errors}), 400

    result = calculate(form.to_input())
    return jsonify({'result': result.to_dict()})

# --- Main Application Routes ---

@bp.route('/')
def index():
    """The manager calculator is the default role."""
    return redirect(url_for('main.manager'))

@bp.route('/manager', methods=['GET', 'POST'])
def manager():
    """Manager incentive calculator page."""
    return _run_form(ManagerIncentiveForm(), calculate_manager_incentive, manager_breakdown_rows, 'manager.html')

@bp.route('/ic', methods=['GET', 'POST'])
def ic():
    """Individual contributor incentive calculator page."""
    return _run_form(ICIncentiveForm(), calculate_ic_incentive, ic_breakdown_rows, 'ic.html')

# --- JSON API ---

@bp.route('/api/incentives/manager', methods=['POST'])
def api_manager():
    return _run_api(ManagerIncentiveApiForm, calculate_manager_incentive)

@bp.route('/api/incentives/ic', methods=['POST'])
def api_ic():
    return _run_api(ICIncentiveApiForm, calculate_ic_incentive)
