"""
Runner for the Kudu data generator: resolves a start mode, connects to the
cluster and drives the mode to completion (or interruption).

Usage (example from CLI):
    from kudu_datagen.runner import run_mode

    stats = run_mode("resume")
    print(stats.as_dict())
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from kudu_datagen.config import Settings, get_settings
from kudu_datagen.domain.stats import InsertStats
from kudu_datagen.infrastructure.kudu_factory import connect
from kudu_datagen.modes.abstract import StartMode
from kudu_datagen.modes.clean import CleanStartMode
from kudu_datagen.modes.resume import ResumeMode
from kudu_datagen.reporter import print_summary
from kudu_datagen.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_MODE = "resume"


def _mode_factories() -> Dict[str, Callable[[Settings], StartMode]]:
    """Registry of available start modes."""
    return {
        "clean": lambda settings: CleanStartMode(settings),
        "resume": lambda settings: ResumeMode(settings),
    }


def available_modes() -> List[str]:
    """List available mode names."""
    return sorted(_mode_factories().keys())


def resolve_mode(name: str, settings: Settings) -> StartMode:
    """
    Build the mode called `name` (case-insensitive).

    Raises
    ------
    ValueError
        If no such mode is registered.
    """
    factories = _mode_factories()
    key = name.strip().lower()
    if key not in factories:
        raise ValueError(f"Unknown mode '{name}'. Available: {', '.join(sorted(factories))}")
    return factories[key](settings)


def run_mode(
    name: str = DEFAULT_MODE,
    settings: Optional[Settings] = None,
    client_factory: Callable[[Optional[str], Settings], object] = connect,
    report: bool = True,
) -> Optional[InsertStats]:
    """
    Connect and run one start mode.

    Parameters
    ----------
    name : str
        Mode name, e.g. "clean" or "resume".
    settings : Settings | None
        Effective settings; defaults to the cached environment settings.
    client_factory : callable
        Opens a client from a master list and the effective settings;
        swappable in tests.
    report : bool
        Whether to print the rich summary when the run ends, including when
        it ends with an exception or Ctrl-C.

    Returns
    -------
    InsertStats | None
        Counters of the run; None if it failed before inserting.
    """
    settings = settings or get_settings()
    mode = resolve_mode(name, settings)

    log.info(f"[MODE] {mode.name.upper()}: {mode.description}", extra={"mode": mode.name})
    try:
        client = client_factory(settings.kudu_masters, settings)
        mode.execute(client)
    except KeyboardInterrupt:
        log.warning(f"[MODE INTERRUPTED] {mode.name}", extra={"mode": mode.name})
        raise
    except Exception:
        log.exception(f"[MODE FAILED] {mode.name}", extra={"mode": mode.name})
        raise
    finally:
        if mode.stats is not None:
            log.info(f"[MODE COMPLETE] {mode.name}", extra=mode.stats.as_dict())
            if report:
                print_summary(mode.stats)

    return mode.stats


__all__ = [
    "DEFAULT_MODE",
    "available_modes",
    "resolve_mode",
    "run_mode",
]
