"""Configuration management using Pydantic settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from mapgeojson.colors import parse_color


class Settings(BaseSettings):
    """Parser and style defaults.

    Values come only from constructor arguments; the process environment and
    .env files are never read, so results do not depend on the host.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    # Style defaults (simplestyle keys absent or malformed)
    default_color: str = "#0000ff"
    default_fill_opacity: float = Field(default=0.5, ge=0.0, le=1.0)
    default_stroke_opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    default_stroke_width: float = Field(default=2.0, ge=0.0)

    # Decoder
    validate_coordinate_ranges: bool = True  # lng in [-180, 180], lat in [-90, 90]

    # Mapper
    warn_on_surface_altitude: bool = True

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    @field_validator("default_color")
    @classmethod
    def _check_default_color(cls, value: str) -> str:
        parse_color(value)
        return value


settings = Settings()
