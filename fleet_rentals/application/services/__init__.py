"""Servicios de aplicación."""

from fleet_rentals.application.services.conflict_evaluator import (
    ConflictDecision,
    ConflictEvaluator,
)

__all__ = [
    "ConflictDecision",
    "ConflictEvaluator",
]
