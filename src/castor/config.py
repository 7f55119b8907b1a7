"""Configuration schema and resolution.

Resolve once, freeze, then flow: configuration is merged from defaults,
``CASTOR_*`` environment variables and programmatic overrides, validated
against the ``Settings`` schema and frozen into a ``FrozenConfig`` that is
handed to the repository.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from castor.errors import ConfigurationError
from castor.pipeline import StrategyName

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "CASTOR_"

_DOTENV_LOADED: bool = False


class Settings(BaseModel):
    """Pydantic schema for configuration validation and defaults."""

    strategy: StrategyName = Field(default="applicative")
    user_id: str = Field(default="1234", min_length=1)

    # Fixture values answered by the stub source
    stub_user_name: str = Field(default="Tyrone", min_length=1)
    stub_tweet_message: str = Field(default="Wahoo")
    stub_sentiment_positive: bool = Field(default=True)

    model_config = {"extra": "forbid"}

    @field_validator("strategy", "user_id", mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> Any:
        """Trim surrounding whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable, validated configuration."""

    strategy: StrategyName
    user_id: str
    stub_user_name: str
    stub_tweet_message: str
    stub_sentiment_positive: bool


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _try_load_dotenv() -> None:
    """Load a ``.env`` file once, if python-dotenv finds one."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


def load_env() -> dict[str, Any]:
    """Read ``CASTOR_*`` environment variables into a settings mapping.

    Unknown names are kept so that validation can reject them. Booleans are
    coerced using the schema's field types.
    """
    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        info = Settings.model_fields.get(field_name)
        if info is not None and info.annotation is bool:
            config[field_name] = _coerce_bool(value)
        else:
            config[field_name] = value
    return config


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Resolve configuration with precedence defaults < env < overrides.

    Args:
        overrides: Programmatic values; ``None`` entries are ignored so CLI
            flags that were not given do not mask the environment.

    Raises:
        ConfigurationError: If the merged values fail validation.
    """
    _try_load_dotenv()

    merged: dict[str, Any] = dict(load_env())
    merged.update({k: v for k, v in (overrides or {}).items() if v is not None})

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err.get("loc", ())) or "config"
        raise ConfigurationError(
            f"Configuration validation failed for {field}: {err.get('msg')}",
            hint=f"Check {ENV_PREFIX}{field.upper()} or the matching override.",
        ) from e

    frozen = FrozenConfig(**settings.model_dump())
    log.debug("Resolved %s", frozen)
    return frozen
