"""Run configuration for the locale checker."""

from __future__ import annotations

from argparse import Namespace as ArgsNamespace
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class CheckerConfig(BaseModel):
    """Settings for one checker run."""

    root: Path
    sort: bool = False
    workers: int = Field(default=1, ge=1)
    indent: int = Field(default=2, ge=0)
    fail_on_missing: bool = False
    report_missing_namespaces: bool = False
    verbose: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_args(cls, args: ArgsNamespace) -> "CheckerConfig":
        """Build a config from parsed command line arguments."""
        log_level = args.log_level
        if log_level is None:
            log_level = "DEBUG" if args.verbose else "WARNING"
        return cls(
            root=args.directory,
            sort=args.sort,
            workers=args.jobs,
            indent=args.indent,
            fail_on_missing=args.fail_on_missing,
            report_missing_namespaces=args.report_missing_namespaces,
            verbose=args.verbose,
            log_level=log_level,
        )
