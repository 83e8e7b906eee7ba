"""Core types: inputs, results, exit codes."""

from .errors import ErrorCode
from .inputs import ActionInputs, InputError, load_inputs
from .result import Err, Ok, Result

__all__ = [
    # errors
    "ErrorCode",
    # inputs
    "ActionInputs",
    "InputError",
    "load_inputs",
    # result
    "Err",
    "Ok",
    "Result",
]
