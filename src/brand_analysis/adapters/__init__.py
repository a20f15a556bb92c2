"""Adapters package exports."""

from .simulated import SimulatedAnalysisClient

__all__ = ["SimulatedAnalysisClient"]
