"""
Kids Calculator - JSON API for performing calculations and reviewing history.
No login required.
"""

from flask import Blueprint, jsonify, request

from app.projects.calculator.core.constants import PROJECT_DISPLAY_NAME, PROJECT_ID
from app.projects.calculator.core.contract import (
    calculation_result_payload,
    clear_history_payload,
    describe_operations,
    history_payload,
    parse_calculation_input,
)
from app.projects.calculator.core.errors import CalculatorError
from app.projects.calculator.core.service import (
    clear_calculation_history,
    get_calculation_history,
    perform_calculation,
)
from app.utils.logging import log_project_visit

calculator_bp = Blueprint('calculator', __name__)


@calculator_bp.errorhandler(CalculatorError)
def handle_calculator_error(e):
    return jsonify(e.to_dict()), e.status_code


@calculator_bp.route('/')
def index():
    """Describe the calculator API."""
    log_project_visit(PROJECT_ID, PROJECT_DISPLAY_NAME)
    return jsonify({
        'project': PROJECT_ID,
        'name': PROJECT_DISPLAY_NAME,
        'operations': describe_operations(),
    })


@calculator_bp.route('/api/calculations', methods=['POST'])
def api_perform_calculation():
    """Perform a calculation. Returns {result, calculation} or {error, kind}."""
    data = request.get_json(silent=True)
    params = parse_calculation_input(data)

    outcome = perform_calculation(
        params.first_number,
        params.second_number,
        params.operation,
    )
    return jsonify(calculation_result_payload(outcome.result, outcome.calculation)), 201


@calculator_bp.route('/api/calculations', methods=['GET'])
def api_calculation_history():
    """All past calculations, most recent first."""
    return jsonify(history_payload(get_calculation_history()))


@calculator_bp.route('/api/calculations', methods=['DELETE'])
def api_clear_calculation_history():
    """Clear the history for a fresh start."""
    outcome = clear_calculation_history()
    return jsonify(clear_history_payload(outcome))
