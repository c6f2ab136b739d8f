"""Core module: types, encoding, registry, evaluator, utilities."""

from .encoding import InvalidInputError, check_bounds, check_design_vector
from .evaluator import evaluate_candidate, evaluate_candidate_batch
from .registry import ModelSpec, UnknownModelError, get_model, list_models
from .types import EvalResult, FluidProperties

__all__ = [
    "EvalResult",
    "FluidProperties",
    "InvalidInputError",
    "ModelSpec",
    "UnknownModelError",
    "check_bounds",
    "check_design_vector",
    "evaluate_candidate",
    "evaluate_candidate_batch",
    "get_model",
    "list_models",
]
