"""
pwcheck Configuration Management
=================================

Centralized configuration for the pwcheck toolkit using Python
dataclasses and TOML-based persistence.

Architecture follows the Twelve-Factor App methodology for configuration
management (Wiggins, 2011), separating config from code.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """Weights and thresholds of the password scoring model.

    The four weights bound how much each scoring factor can contribute.
    The three thresholds are inclusive upper bounds partitioning the
    0-100 score range into Weak, Fair, Strong and VeryStrong.

    All values are tunable heuristics, not physically derived constants.
    """

    # Length bounds
    min_length: int = 8
    max_length_allowed: int = 512

    # Factor weights
    length_cap_points: int = 60
    variety_points: int = 10
    pattern_points: int = 10
    passphrase_points: int = 10

    # Category thresholds (scores above strong_max are VeryStrong)
    weak_max: int = 24
    fair_max: int = 59
    strong_max: int = 79

    @property
    def thresholds_ordered(self) -> bool:
        """``True`` when ``weak_max < fair_max < strong_max < 100``."""
        return self.weak_max < self.fair_max < self.strong_max < 100


@dataclass(frozen=False, slots=True)
class WordlistConfig:
    """Locations of the blocklist and dictionary word files.

    An empty path selects the built-in default list.
    """

    blocklist_path: str = ""
    dictionary_path: str = ""


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and general operation."""

    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PwcheckConfig:
    """Master configuration aggregating scoring, wordlist and global settings.

    Usage:
        >>> config = PwcheckConfig.load()                  # from default path
        >>> config = PwcheckConfig.load("custom.toml")     # from custom path
        >>> print(config.scoring.weak_max)
        24
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    wordlists: WordlistConfig = field(default_factory=WordlistConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PwcheckConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`PwcheckConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            scoring=cls._build_section(ScoringConfig, raw.get("scoring", {})),
            wordlists=cls._build_section(WordlistConfig, raw.get("wordlists", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> PwcheckConfig:
    """Module-level convenience wrapper around :meth:`PwcheckConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = PwcheckConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
