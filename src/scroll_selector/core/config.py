"""
Configuration management for Scroll Selector
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from scroll_selector.domain.selection.exceptions import InvalidSelectionParamsError
from scroll_selector.domain.selection.models import SelectionArea, SelectionParams


@dataclass
class SelectionConfig:
    """Configuration for the selection ratio solver."""

    top_perception_range: int = 2500
    bottom_perception_range: int = 2500
    selection_y_mid: float = 0.5
    stiffness: float = 0.6
    # Selection area relative to the viewport height
    area_from: float = 0.0
    area_to: float = 1.0

    def to_area(self) -> SelectionArea:
        return SelectionArea(ratio_from=self.area_from, ratio_to=self.area_to)

    def to_params(self) -> SelectionParams:
        """Build solver parameters.

        Raises:
            InvalidSelectionParamsError: If configuration values are invalid
        """
        params = SelectionParams(
            top_perception_range=self.top_perception_range,
            bottom_perception_range=self.bottom_perception_range,
            selection_y_mid=self.selection_y_mid,
            stiffness=self.stiffness,
        )
        return params.with_selection_area(self.to_area())

    def validate(self) -> None:
        """Validate selection configuration values.

        Raises:
            InvalidSelectionParamsError: If configuration values are invalid
        """
        self.to_params()


@dataclass
class DemoConfig:
    """Configuration for the terminal demo list."""

    item_count: int = 200
    min_item_height: int = 1
    max_item_height: int = 4
    scroll_step: int = 1
    seed: int = 7

    def validate(self) -> None:
        """Validate demo configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.item_count < 0:
            raise ValueError(f"item_count must be >= 0, got {self.item_count}")
        if self.min_item_height < 1:
            raise ValueError(f"min_item_height must be >= 1, got {self.min_item_height}")
        if self.max_item_height < self.min_item_height:
            raise ValueError(
                f"max_item_height ({self.max_item_height}) must be >= "
                f"min_item_height ({self.min_item_height})"
            )
        if self.scroll_step < 1:
            raise ValueError(f"scroll_step must be >= 1, got {self.scroll_step}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/scroll-selector/scroll-selector.log)
    )


@dataclass
class Config:
    """Main configuration object."""

    selection: SelectionConfig = field(default_factory=SelectionConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "scroll-selector"
    return Path.home() / ".config" / "scroll-selector"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "scroll-selector"
    return Path.home() / ".local" / "share" / "scroll-selector"


def get_log_file_path(cfg: Optional[Config] = None) -> Path:
    """Get the log file path, honoring a custom path from the config."""
    if cfg is not None and cfg.logging.log_file:
        return Path(cfg.logging.log_file).expanduser()
    return get_data_dir() / "scroll-selector.log"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in the project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/scroll-selector (or ~/.config/scroll-selector)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Scroll Selector Configuration

[selection]
# How far (px) to look for the top/bottom content edge.
# Recommended: between 1x and 2x the height of the scrollable view.
top_perception_range = 2500
bottom_perception_range = 2500

# Selection ratio used when no content edge is in range
# (0.0 = viewport top, 1.0 = viewport bottom)
selection_y_mid = 0.5

# 0.0 = maximal curvature, 1.0 = straight line
stiffness = 0.6

# Part of the viewport where selection is allowed (relative to its height)
area_from = 0.0
area_to = 1.0

[demo]
# Number of items in the demo list
item_count = 200

# Item heights (rows) are drawn randomly from this range
min_item_height = 1
max_item_height = 4

# Rows scrolled per key press
scroll_step = 1

# Random seed for item heights
seed = 7

[logging]
# Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/scroll-selector/scroll-selector.log)
# log_file = "/path/to/custom/scroll-selector.log"
""".strip()


def _apply_env_overrides(config: Config) -> None:
    """Apply SCROLL_SELECTOR_* environment variables on top of the TOML values."""
    level = os.environ.get("SCROLL_SELECTOR_LOG_LEVEL")
    if level:
        config.logging.level = level

    stiffness = os.environ.get("SCROLL_SELECTOR_STIFFNESS")
    if stiffness:
        try:
            config.selection.stiffness = float(stiffness)
        except ValueError:
            # Loguru has no file sink yet
            print(f"Warning: Ignoring invalid SCROLL_SELECTOR_STIFFNESS={stiffness!r}")


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML data, falling back to defaults per key."""
    config = Config()

    if "selection" in toml_data:
        selection_data = toml_data["selection"]
        defaults = config.selection
        config.selection = SelectionConfig(
            top_perception_range=selection_data.get(
                "top_perception_range", defaults.top_perception_range
            ),
            bottom_perception_range=selection_data.get(
                "bottom_perception_range", defaults.bottom_perception_range
            ),
            selection_y_mid=selection_data.get("selection_y_mid", defaults.selection_y_mid),
            stiffness=selection_data.get("stiffness", defaults.stiffness),
            area_from=selection_data.get("area_from", defaults.area_from),
            area_to=selection_data.get("area_to", defaults.area_to),
        )

    if "demo" in toml_data:
        demo_data = toml_data["demo"]
        defaults = config.demo
        config.demo = DemoConfig(
            item_count=demo_data.get("item_count", defaults.item_count),
            min_item_height=demo_data.get("min_item_height", defaults.min_item_height),
            max_item_height=demo_data.get("max_item_height", defaults.max_item_height),
            scroll_step=demo_data.get("scroll_step", defaults.scroll_step),
            seed=demo_data.get("seed", defaults.seed),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level),
            log_file=logging_data.get("log_file"),
        )

    return config


def _validate_sections(config: Config) -> None:
    """Replace each invalid section with its defaults."""
    try:
        config.selection.validate()
    except (InvalidSelectionParamsError, TypeError, ValueError) as e:
        print(f"Warning: Invalid selection configuration: {e}")
        print("Using default selection configuration.")
        config.selection = SelectionConfig()

    try:
        config.demo.validate()
    except (TypeError, ValueError) as e:
        print(f"Warning: Invalid demo configuration: {e}")
        print("Using default demo configuration.")
        config.demo = DemoConfig()


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - SCROLL_SELECTOR_LOG_LEVEL
    - SCROLL_SELECTOR_STIFFNESS
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        config = Config()
    else:
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
            config = parse_config(toml_data)
        except Exception as e:
            print(f"Error loading configuration from {config_path}: {e}")
            print("Using default configuration.")
            config = Config()

    _apply_env_overrides(config)
    _validate_sections(config)
    return config


def save_default_config(config_path: Optional[Path] = None) -> Path:
    """Write the default configuration file if it does not exist yet.

    Returns:
        Path of the configuration file
    """
    config_path = config_path or (get_config_dir() / "config.toml")
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
    return config_path
