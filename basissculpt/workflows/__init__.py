"""BasisSculpt workflows."""
from .input_validation import process_input, validate_input
from .workflow_sculpt import workflow_sculpt

__all__ = ['process_input', 'validate_input', 'workflow_sculpt']
