"""Linkage module: four-bar crank swing model."""

from .fourbar import LinkageConfig, LinkageParams, crank_angle, evaluate_linkage, linkage_objective

__all__ = ["LinkageConfig", "LinkageParams", "crank_angle", "evaluate_linkage", "linkage_objective"]
