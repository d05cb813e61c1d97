from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from desiredcaps.core.config import ParserSettings


class LoggingSettings(BaseModel):
    level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description=(
                "Logging verbosity.\n"
                "DEBUG also reports why values were kept as text (integer overflow,\n"
                "options that are not JSON objects)."
            ),
            default="INFO"
        )
    ]

    diagnostics: Annotated[
        Literal["log", "stderr", "silent"],
        Field(
            description=(
                "Where warnings about discarded trailing symbols go.\n"
                "  log    → the 'desiredcaps.diagnostics' logger at WARNING (default)\n"
                "  stderr → plain lines on standard error\n"
                "  silent → dropped\n"
            ),
            default="log"
        )
    ]


class DesiredCapsConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DESIREDCAPS_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    parser: Annotated[
        ParserSettings,
        Field(
            description=(
                "Capability string parsing.\n"
                "Controls which capability stays textual, which names are promoted\n"
                "to JSON objects, and how deep bracket nesting may go."
            ),
            default_factory=ParserSettings
        )
    ]

    logging: Annotated[
        LoggingSettings,
        Field(
            description="Logging level and destination of parse diagnostics.",
            default_factory=LoggingSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))

    @classmethod
    def load(cls, configfile: Path | None = None, **overrides: Any) -> "DesiredCapsConfig":
        """
        Build the configuration.

        Priority: explicit overrides > environment > YAML file > defaults.
        Nested sections are merged key by key, so an override of
        ``parser.max_depth`` keeps the file's ``parser.options_suffix``.
        """
        if configfile is None:
            return cls(**overrides)

        bound = type(cls.__name__, (cls,), {
            "model_config": SettingsConfigDict(yaml_file=configfile),
        })
        return bound(**overrides)
