"""Run execution domain exports."""

from .generation_use_case import RunExecutionError, execute_generation_run, generate_documentation
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "RunExecutionError",
    "execute_generation_run",
    "generate_documentation",
]
