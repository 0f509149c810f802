from pathlib import Path
from typing import Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DEPGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    # Scanner Configuration
    max_file_size_mb: int = Field(default=10)
    ignored_dirs: str = Field(
        default=".git,.venv,venv,env,__pycache__,node_modules,.idea,.vscode,.pytest_cache,.mypy_cache,build,dist"
    )

    @property
    def ignored_dirs_list(self) -> List[str]:
        """Get ignored directories as a list."""
        return [d.strip() for d in self.ignored_dirs.split(",") if d.strip()]

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024

    @property
    def log_dir(self) -> Optional[Path]:
        """Get log directory path."""
        if not self.log_file:
            return None
        return Path(self.log_file).parent


settings = Settings()
