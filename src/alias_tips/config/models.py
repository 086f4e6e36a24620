"""
Pydantic models for Alias Tips configuration validation.
"""

from typing import List, Optional
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppConfig(BaseModel):
    """Application-level configuration settings."""

    name: str = Field(default="Alias Tips", description="Application display name")
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Logging level")

    log_file: Optional[str] = Field(default=None, description="Optional log file location")
    max_log_size_mb: int = Field(default=1, ge=1, le=100, description="Maximum log file size")
    backup_count: int = Field(default=3, ge=1, le=20, description="Number of backup log files")

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('log_file')
    @classmethod
    def expand_path(cls, v):
        """Expand user home directory in paths."""
        if v is None:
            return v
        return str(Path(v).expanduser())


class TipsConfig(BaseModel):
    """Settings controlling how tips are computed and shown."""

    text: str = Field(default="Alias tip: ", description="Text printed before the tip")
    expand: bool = Field(default=True, description="Expand a leading alias before matching")
    excludes: List[str] = Field(default=[], description="Alias names never suggested")
    force: bool = Field(default=False, description="Signal a found tip with a distinct exit status")
    color: bool = Field(default=True, description="Colorize the tip")

    @field_validator('excludes', mode='before')
    @classmethod
    def split_excludes(cls, v):
        """Accept a space-separated string as well as a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return v.split()
        return v


class GitConfig(BaseModel):
    """Git alias registry settings."""

    enabled: bool = Field(default=True, description="Include git aliases")
    executable: str = Field(default="git", description="Git executable")
    timeout_seconds: float = Field(default=5.0, ge=0.1, le=60.0, description="Timeout for the git call")


class AliasTipsConfig(BaseModel):
    """Main configuration model."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    app: AppConfig = Field(default_factory=AppConfig)
    tips: TipsConfig = Field(default_factory=TipsConfig)
    git: GitConfig = Field(default_factory=GitConfig)
