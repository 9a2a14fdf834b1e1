from dataclasses import dataclass, replace
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from meadcalc.errors import InvalidInput
from meadcalc.presets import ABV_MAX, ABV_MIN, DEFAULT_EXAMPLE, OG_CEILING


@dataclass(frozen=True)
class ValidationPolicy:
    """Input checks and the gravity ceiling rule shared by every front end."""

    abv_min: float = ABV_MIN
    abv_max: float = ABV_MAX
    enforce_abv_range: bool = True
    og_ceiling: float = OG_CEILING
    abort_on_implausible: bool = True


# The console stops on an implausible OG, the windowed app warns and carries on
SURFACE_DEFAULTS = {
    "cli": ValidationPolicy(abort_on_implausible=True),
    "gui": ValidationPolicy(abort_on_implausible=False),
}


class PolicySettings(BaseSettings):
    """MEADCALC_* overrides; anything left unset keeps the surface default."""

    model_config = SettingsConfigDict(
        env_prefix="MEADCALC_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    abv_min: Optional[float] = None
    abv_max: Optional[float] = None
    enforce_abv_range: Optional[bool] = None
    og_ceiling: Optional[float] = None
    abort_on_implausible: Optional[bool] = None


def load_policy(surface: str = "cli", dotenv: bool = True) -> ValidationPolicy:
    if surface not in SURFACE_DEFAULTS:
        raise ValueError(f"Unknown surface {surface!r}; expected one of {sorted(SURFACE_DEFAULTS)}")
    try:
        settings = PolicySettings(_env_file=".env" if dotenv else None)
    except ValidationError as e:
        raise InvalidInput(f"Invalid MEADCALC_* setting: {e}") from None
    policy = replace(SURFACE_DEFAULTS[surface], **settings.model_dump(exclude_none=True))
    if policy.abv_min > policy.abv_max:
        raise InvalidInput(
            f"MEADCALC_ABV_MIN ({policy.abv_min}) is greater than MEADCALC_ABV_MAX ({policy.abv_max})."
        )
    return policy


def default_abv(policy: ValidationPolicy) -> float:
    """Starting ABV for an input widget, kept inside the policy's range."""
    abv = float(DEFAULT_EXAMPLE["abv"])
    if policy.enforce_abv_range:
        abv = min(max(abv, policy.abv_min), policy.abv_max)
    return abv
