"""Environment-driven settings for the SBOL core data model."""

# purpose: resolve validation and logging policies from process environment
# status: active
# related_docs: SPEC_FULL.md

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DUPLICATE_POLICIES = ("ignore", "reject")


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Snapshot of the sbolcore policies in effect."""

    validate_nucleotides: bool = True
    strict_display_id: bool = False
    duplicate_policy: str = "ignore"
    log_level: str = "WARNING"

    @property
    def reject_duplicates(self) -> bool:
        return self.duplicate_policy == "reject"


def get_log_level() -> str:
    """Return the ``SBOL_LOG_LEVEL`` name, or WARNING when logging does not know it."""

    level = os.getenv("SBOL_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def get_settings() -> Settings:
    """Read the current settings from the environment."""

    # purpose: evaluate policies on every call so tests and hosts can flip them at runtime
    # outputs: frozen Settings instance
    policy = os.getenv("SBOL_DUPLICATE_POLICY", "ignore").strip().lower()
    if policy not in DUPLICATE_POLICIES:
        raise ValueError(
            f"SBOL_DUPLICATE_POLICY must be one of {DUPLICATE_POLICIES}, got {policy!r}"
        )
    return Settings(
        validate_nucleotides=_flag("SBOL_VALIDATE_NUCLEOTIDES", "1"),
        strict_display_id=_flag("SBOL_STRICT_DISPLAY_ID", "0"),
        duplicate_policy=policy,
        log_level=get_log_level(),
    )
