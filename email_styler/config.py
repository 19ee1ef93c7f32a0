"""Process settings for the MCP server and command line."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from email_styler.styles import StyleConfig, load_styles


class Settings(BaseSettings):
    """Settings loaded from ``EMAIL_STYLER_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_STYLER_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    styles: StyleConfig = Field(
        default_factory=StyleConfig,
        description="Default style parameters, e.g. EMAIL_STYLER_STYLES__FONT_SIZE=18.",
    )
    styles_file: Path | None = Field(
        default=None,
        description="JSON style file exported by the style controls, layered over `styles`.",
    )
    wrap_in_html: bool = Field(
        default=False,
        description="Render full HTML documents instead of a container fragment by default.",
    )
    log_level: str = Field(default="WARNING", description="Logging level for the command line.")

    def default_styles(self) -> StyleConfig:
        """Effective default styles; raises StyleFileError for a bad styles_file."""
        if self.styles_file is None:
            return self.styles
        return load_styles(self.styles_file, base=self.styles)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings."""

    return Settings()
