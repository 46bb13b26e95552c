from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .core.constants import DEFAULT_EDIT_WINDOW_MINUTES
from .policy.model import Policy
from .policy.validation import validate_policy


@dataclass(frozen=True)
class Settings:
    module: str
    debug: bool
    log_level: str
    edit_window_minutes: int
    seed_default_policy: bool
    default_policy: Policy


def load_settings(module: Optional[str] = None) -> Settings:
    """Load the settings module chosen by APP_ENV (after reading .env)."""
    load_dotenv(override=False)
    module = module or get_settings_module()
    settings = importlib.import_module(module)

    return Settings(
        module=module,
        debug=bool(getattr(settings, "DEBUG", False)),
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        edit_window_minutes=int(getattr(settings, "ATTENDANCE_EDIT_WINDOW_MINUTES", DEFAULT_EDIT_WINDOW_MINUTES)),
        seed_default_policy=bool(getattr(settings, "SEED_DEFAULT_POLICY", False)),
        default_policy=validate_policy(Policy.from_mapping(getattr(settings, "DEFAULT_POLICY"))),
    )
