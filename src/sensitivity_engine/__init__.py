from src.sensitivity_engine.calculator import SensitivityCalculator, calculate_sensitivity
from src.sensitivity_engine.explanation import generate_explanation
from src.sensitivity_engine.input_parser import InputValidationError, parse_calculation_input
from src.sensitivity_engine.models import CalculationInput, SensitivityResult

calculate = calculate_sensitivity
explain = generate_explanation

__all__ = [
    "CalculationInput",
    "InputValidationError",
    "SensitivityCalculator",
    "SensitivityResult",
    "calculate",
    "calculate_sensitivity",
    "explain",
    "generate_explanation",
    "parse_calculation_input",
]
