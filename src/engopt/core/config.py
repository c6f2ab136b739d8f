"""Configuration management with pydantic and YAML support.

Each model section validates the knobs a user may change and converts them
into the immutable configuration record the evaluation model consumes.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from ..hx.coolant_air import CoolantAirHXConfig
from ..hx.dual_side import DualSideHXConfig
from ..hx.single import SingleHXConfig
from ..linkage.fourbar import LinkageConfig
from .constants import LINKAGE_MIN_ANGLE_DIFF_DEG, LINKAGE_OFFSET_DEG, LINKAGE_PENALTY
from .logging import get_logger

logger = get_logger(__name__)


class LinkageSection(BaseModel):
    """Four-bar linkage fixed data."""

    l1: float = Field(default=215.0, gt=0)
    offset_deg: float = Field(default=LINKAGE_OFFSET_DEG, ge=-360, le=360)
    penalty: float = Field(default=LINKAGE_PENALTY, gt=0)
    min_angle_diff_deg: float = Field(default=LINKAGE_MIN_ANGLE_DIFF_DEG, ge=0, le=180)

    def to_model_config(self) -> LinkageConfig:
        return LinkageConfig(
            l1=self.l1,
            offset_deg=self.offset_deg,
            penalty=self.penalty,
            min_angle_diff_deg=self.min_angle_diff_deg,
        )


class SingleHXSection(BaseModel):
    """Single-geometry heat exchanger fixed data."""

    m_dot_hot: float = Field(default=0.3, gt=0)
    m_dot_cold: float = Field(default=0.4, gt=0)
    length: float = Field(default=0.4, gt=0)
    width: float = Field(default=0.3, gt=0)
    n_rows: int = Field(default=8, ge=1, le=200)
    fouling: float = Field(default=2.0e-4, ge=0)
    pump_efficiency: float = Field(default=0.7, gt=0, le=1)
    required_heat_transfer: float = Field(default=10_000.0, ge=0)

    def to_model_config(self) -> SingleHXConfig:
        return replace(SingleHXConfig(), **self.model_dump())


class DualHX18Section(BaseModel):
    """Manglik-Bergles dual-side exchanger fixed data."""

    t_hot_in: float = Field(default=50.0)
    t_cold_in: float = Field(default=20.0)
    total_heat_load: float = Field(default=5000.0, gt=0)
    weight_limit: float = Field(default=20.0, gt=0)
    pressure_drop_limit: float = Field(default=250.0, gt=0)
    weight_norm: float = Field(default=1.0, gt=0)
    pressure_norm: float = Field(default=1.0, gt=0)

    def to_model_config(self) -> DualSideHXConfig:
        return replace(DualSideHXConfig(), **self.model_dump())


class DualHX11Section(BaseModel):
    """Dittus-Boelter coolant/air exchanger fixed data."""

    core_length: float = Field(default=0.4, gt=0)
    total_heat_load: float = Field(default=5000.0, gt=0)
    max_layers: float = Field(default=30.0, gt=0)
    max_air_flow: float = Field(default=1.2, gt=0)
    max_coolant_flow: float = Field(default=0.6, gt=0)
    weight_norm: float = Field(default=1.0, gt=0)
    pressure_norm: float = Field(default=1.0, gt=0)

    def to_model_config(self) -> CoolantAirHXConfig:
        return replace(CoolantAirHXConfig(), **self.model_dump())


class OptimizationConfig(BaseModel):
    """Optimization settings."""

    pop_size: int = Field(default=64, ge=8, le=1000)
    n_gen: int = Field(default=100, ge=1, le=10000)
    seed: int = Field(default=42, ge=0)
    algorithm: Literal["auto", "ga", "nsga2", "nsga3"] = "auto"
    n_partitions: int = Field(default=12, ge=1, le=100)


class EngoptConfig(BaseModel):
    """Root configuration object."""

    linkage: LinkageSection = Field(default_factory=LinkageSection)
    single_hx: SingleHXSection = Field(default_factory=SingleHXSection)
    dual_hx_18: DualHX18Section = Field(default_factory=DualHX18Section)
    dual_hx_11: DualHX11Section = Field(default_factory=DualHX11Section)
    optimization: OptimizationConfig = Field(default_factory=OptimizationConfig)

    def fixed_data(self, model: str) -> Any:
        """Immutable model configuration for a model key."""
        section = getattr(self, model, None)
        if not isinstance(section, BaseModel) or model == "optimization":
            raise KeyError(f"No configuration section for model {model!r}")
        return section.to_model_config()


def load_config(path: str | Path) -> EngoptConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed EngoptConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    logger.debug("config loaded", path=str(path))
    return EngoptConfig.model_validate(data or {})


def save_config(config: EngoptConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)


def default_config() -> EngoptConfig:
    """Return default configuration."""
    return EngoptConfig()


def merge_config(base: EngoptConfig, overrides: dict[str, Any]) -> EngoptConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return EngoptConfig.model_validate(merged)
