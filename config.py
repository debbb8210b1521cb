import math
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

import parameters

# Largest replicate count the compiled kernels can index.
MAX_REPLICATES = 2**63 - 1


class ConfigurationError(ValueError):
    """Raised when model or run configuration is invalid."""


def _require_finite(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")
    return value


def _require_positive(name: str, value: Any) -> float:
    value = _require_finite(name, value)
    if value <= 0.0:
        raise ConfigurationError(f"{name} must be strictly positive, got {value!r}")
    return value


def _require_count(name: str, value: Any, minimum: int = 1) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value!r}")
    return value


@dataclass(frozen=True)
class ModelParameters:
    """Black-Scholes-Merton market and contract inputs.

    volatility and time_to_maturity are strictly positive because both the
    closed form and the GBM exponent scale with volatility * sqrt(T).
    """

    starting_price: float
    strike_price: float
    volatility: float
    risk_free_rate: float
    time_to_maturity: float
    dividend_yield: float = 0.0

    def __post_init__(self) -> None:
        for name in ("starting_price", "strike_price", "volatility", "time_to_maturity"):
            object.__setattr__(self, name, _require_positive(name, getattr(self, name)))
        for name in ("risk_free_rate", "dividend_yield"):
            object.__setattr__(self, name, _require_finite(name, getattr(self, name)))

    @property
    def discount(self) -> float:
        return math.exp(-self.risk_free_rate * self.time_to_maturity)


@dataclass(frozen=True)
class SimulationConfig:
    """Everything one invocation of the sweeps needs.

    Defaults reproduce the reference run in ``parameters.py``. Validation
    happens at construction, so an instance is always usable.
    """

    starting_price: float = parameters.S0
    strike_price: float = parameters.K
    volatility: float = parameters.sigma
    risk_free_rate: float = parameters.r
    dividend_yield: float = parameters.q
    time_to_maturity: float = parameters.T
    direct_run_count: int = parameters.direct_runs
    direct_base_replicates: int = parameters.direct_base_R
    antithetic_run_count: int = parameters.antithetic_runs
    antithetic_base_replicates: int = parameters.antithetic_base_R
    replicate_multiplier: int = parameters.multiplier
    seed: Optional[int] = parameters.seed
    confidence_multiplier: float = parameters.z_95
    chunk_size: int = parameters.chunk_size

    def __post_init__(self) -> None:
        # Builds (and therefore validates) the model inputs.
        self.model_parameters

        for name in (
            "direct_run_count",
            "direct_base_replicates",
            "antithetic_run_count",
            "antithetic_base_replicates",
            "chunk_size",
        ):
            _require_count(name, getattr(self, name))
        _require_count("replicate_multiplier", self.replicate_multiplier, minimum=2)
        object.__setattr__(
            self,
            "confidence_multiplier",
            _require_positive("confidence_multiplier", self.confidence_multiplier),
        )
        if self.seed is not None:
            _require_count("seed", self.seed, minimum=0)

        for label, base, runs in (
            ("direct", self.direct_base_replicates, self.direct_run_count),
            ("antithetic", self.antithetic_base_replicates, self.antithetic_run_count),
        ):
            largest = base * self.replicate_multiplier ** (runs - 1)
            if largest > MAX_REPLICATES:
                raise ConfigurationError(
                    f"{label} sweep would need {largest} replicates in its last run, "
                    f"more than the supported maximum of {MAX_REPLICATES}"
                )

    @property
    def model_parameters(self) -> ModelParameters:
        return ModelParameters(
            starting_price=self.starting_price,
            strike_price=self.strike_price,
            volatility=self.volatility,
            risk_free_rate=self.risk_free_rate,
            time_to_maturity=self.time_to_maturity,
            dividend_yield=self.dividend_yield,
        )

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with the non-None ``overrides`` applied."""
        _check_keys(overrides)
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _check_keys(values: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration option(s): {', '.join(unknown)}"
        )


def default_config() -> SimulationConfig:
    return SimulationConfig()


def config_from_mapping(
    values: Mapping[str, Any], base: Optional[SimulationConfig] = None
) -> SimulationConfig:
    """Overlay a mapping of recognized option names onto ``base``."""
    if not isinstance(values, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping of option names, got {type(values).__name__}"
        )
    _check_keys(values)
    base = default_config() if base is None else base
    return replace(base, **dict(values))


def load_config(
    path: Union[str, Path], base: Optional[SimulationConfig] = None
) -> SimulationConfig:
    """Load a YAML file of recognized options on top of ``base``."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            values = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing YAML configuration {path}: {e}") from e

    # An empty file means "no overrides".
    if values is None:
        values = {}
    return config_from_mapping(values, base)
