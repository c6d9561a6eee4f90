# ==============================================================================
# run.py
# ------------------------------------------------------------------------------
# The main entry point to launch the Flask application.
# ==============================================================================

from incentives import create_app
from incentives.calculator import calculate_ic_incentive, calculate_manager_incentive
from incentives.calculator.models import ICInput, ManagerInput

# Create the Flask application instance using the factory function
app = create_app()

@app.shell_context_processor
def make_shell_context():
    """Provides a shell context for the `flask shell` command."""
    return {
        'ICInput': ICInput,
        'ManagerInput': ManagerInput,
        'calculate_ic_incentive': calculate_ic_incentive,
        'calculate_manager_incentive': calculate_manager_incentive
    }

if __name__ == '__main__':
    app.run(debug=True)
