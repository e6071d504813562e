"""Mini README: Runtime configuration for the vending machine simulator.

Structure:
    * VendingSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the web app and the launcher.

Usage:
    Override any field with a ``VENDINGSIM_`` prefixed environment variable or
    a ``.env`` file, e.g. ``VENDINGSIM_INITIAL_BALANCE=10`` to start the
    machine with credit already deposited.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class VendingSettings(BaseSettings):
    """Runtime configuration for the simulator and its control panel."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    inventory_file: Optional[Path] = Field(
        None,
        description=(
            "Property list or JSON document used to seed the inventory."
            " Leave unset to use the resource bundled with the package."
        ),
    )
    initial_balance: float = Field(
        0.0,
        description="Amount already deposited when a machine is created.",
        ge=0.0,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level, e.g. DEBUG to trace rejected vends.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the control panel to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the control panel listens on.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "VENDINGSIM_"
        env_file = ".env"
        case_sensitive = False

    @validator("inventory_file", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        """Expand user directories so ``~/stock.plist`` works from a shell."""

        if value is None or value == "":
            return None
        return Path(value).expanduser().resolve()


@lru_cache()
def get_settings() -> VendingSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return VendingSettings()
