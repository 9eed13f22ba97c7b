"""Pipeline configuration - threshold, timestamp and prefix settings.

Each ``Quill`` pipeline owns its own ``QuillConfig``. Values can come from
keyword arguments or from ``QUILL_``-prefixed environment variables::

    QUILL_LEVEL=high QUILL_TIME_MODE=absolute QUILL_SHOW_THREAD=true
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quill.levels import GlyphSet, Level, TimeMode

DEFAULT_TIME_FORMAT = "%H:%M:%S"


class QuillConfig(BaseSettings):
    """Presentation and filtering settings for one pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="QUILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    level: Level = Field(
        default=Level.LOW,
        description="Minimum level a message needs to reach the sink",
    )
    time_mode: TimeMode = Field(
        default=TimeMode.ELAPSED,
        description="Timestamp prefix strategy",
    )
    time_format: str = Field(
        default=DEFAULT_TIME_FORMAT,
        min_length=1,
        description="strftime pattern for absolute timestamps",
    )
    show_type: bool = Field(
        default=False,
        description="Prefix messages with [TYPE] labels instead of glyphs",
    )
    show_thread: bool = Field(
        default=False,
        description="Prefix messages with the emitting thread's name",
    )
    glyphs: GlyphSet = Field(
        default=GlyphSet.ASCII,
        description="Symbol family used when type labels are hidden",
    )

    @field_validator("level", "time_mode", "glyphs", mode="before")
    @classmethod
    def _lowercase(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("time_format")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("time_format must not be blank")
        return v
