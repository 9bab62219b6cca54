"""
Configuration loading and validation for Hunk Stats.

This module handles configuration file parsing, validation, and provides
sensible defaults for all configuration options.
"""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

CONFIG_FILE_NAMES = [".hunk-stats.yaml", ".hunk-stats.yml"]


class ParserConfig(BaseModel):
    """Configuration for the diff parser."""
    
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read diff files.",
    )
    include_patterns: list[str] = Field(
        default=["*"],
        description="Glob patterns for file paths to include in the report.",
    )
    exclude_patterns: list[str] = Field(
        default_factory=list,
        description="Glob patterns for file paths to exclude from the report.",
    )


class OutputConfig(BaseModel):
    """Configuration for output formatting."""
    
    format: Literal["text", "json", "yaml", "markdown"] = Field(
        default="text",
        description="Default output format.",
    )
    colorize: bool = Field(
        default=True,
        description="Use colors in terminal output.",
    )
    show_intervals: bool = Field(
        default=True,
        description="Show added/deleted line intervals.",
    )


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging."""
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level for the hunk_stats logger.",
    )


class Config(BaseModel):
    """Root configuration model for Hunk Stats."""
    
    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    
    class Config:
        """Pydantic model configuration."""
        
        extra = "forbid"


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from a YAML file.
    
    Args:
        config_path: Path to the configuration file. If None, returns defaults.
        
    Returns:
        Config object with loaded or default values.
        
    Raises:
        FileNotFoundError: If the specified config file doesn't exist.
        ValueError: If the config file is invalid.
    """
    if config_path is None:
        return Config()
    
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return Config(**data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e
    except Exception as e:
        raise ValueError(f"Failed to load configuration: {e}") from e


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Search for a configuration file starting from the given path.
    
    Searches for `.hunk-stats.yaml` or `.hunk-stats.yml` in the start
    path and parent directories.
    
    Args:
        start_path: Directory to start searching from.
        
    Returns:
        Path to the config file if found, None otherwise.
    """
    current = start_path.resolve()
    while current != current.parent:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.exists():
                return config_path
        current = current.parent
    
    return None
