"""Environment-driven configuration for the ledger and its front ends."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Mapping, Optional

from .adjustments import AdjustmentPolicy
from .exceptions import ValidationError
from .goals import DEFAULT_SAVINGS_GOAL
from .validators import parse_amount

ENV_PREFIX = "LEDGER_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(raw: str, name: str) -> bool:
    canonical = raw.strip().lower()
    if canonical in _TRUE_VALUES:
        return True
    if canonical in _FALSE_VALUES:
        return False
    raise ValidationError(f"{name} must be a boolean flag")


@dataclass(frozen=True)
class LedgerConfig:
    env: str = "prod"
    allowed_origins: List[str] = field(default_factory=list)
    savings_goal: Decimal = DEFAULT_SAVINGS_GOAL
    seed_demo: bool = False
    adjustment_policy: AdjustmentPolicy = AdjustmentPolicy.STRICT
    currency_symbol: str = "R$"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.env in {"dev", "development"}

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LedgerConfig":
        """Read ``LEDGER_*`` variables, falling back to defaults for unset ones."""
        source = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return source.get(ENV_PREFIX + name)

        values = {}
        if get("ENV") is not None:
            values["env"] = get("ENV").strip().lower()
        if get("ALLOWED_ORIGINS") is not None:
            values["allowed_origins"] = [
                origin.strip() for origin in get("ALLOWED_ORIGINS").split(",") if origin.strip()
            ]
        if get("SAVINGS_GOAL") is not None:
            values["savings_goal"] = parse_amount(get("SAVINGS_GOAL"), "LEDGER_SAVINGS_GOAL")
        if get("SEED_DEMO") is not None:
            values["seed_demo"] = _parse_bool(get("SEED_DEMO"), "LEDGER_SEED_DEMO")
        if get("ADJUSTMENT_POLICY") is not None:
            try:
                values["adjustment_policy"] = AdjustmentPolicy(
                    get("ADJUSTMENT_POLICY").strip().lower()
                )
            except ValueError as exc:
                allowed = ", ".join(policy.value for policy in AdjustmentPolicy)
                raise ValidationError(
                    f"LEDGER_ADJUSTMENT_POLICY must be one of: {allowed}"
                ) from exc
        if get("CURRENCY_SYMBOL") is not None:
            values["currency_symbol"] = get("CURRENCY_SYMBOL").strip()
        if get("LOG_LEVEL") is not None:
            level = get("LOG_LEVEL").strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ValidationError(f"LEDGER_LOG_LEVEL has unknown level {level!r}")
            values["log_level"] = level
        return cls(**values)
