from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from desiredcaps.core.scanner import DEFAULT_MAX_DEPTH


class ParserSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    version_key: Annotated[
        str,
        Field(
            description=(
                "Capability stored verbatim as text, never coerced.\n"
                "Consumers expect the browser/platform version to stay textual\n"
                "even when it looks like a number (e.g. version=45)."
            ),
            default="version"
        )
    ]

    options_suffix: Annotated[
        str,
        Field(
            description=(
                "Case-insensitive name suffix that enables JSON object promotion.\n"
                "A capability such as chromeOptions={\"args\": []} is stored as a\n"
                "decoded mapping instead of text."
            ),
            default="options",
            min_length=1
        )
    ]

    promote_options: Annotated[
        bool,
        Field(
            description=(
                "Decode JSON objects under names ending with options_suffix.\n"
                "When disabled every such value is kept as text."
            ),
            default=True
        )
    ]

    max_depth: Annotated[
        int,
        Field(
            description=(
                "Maximum bracket nesting depth accepted inside a JSON array or\n"
                "object value. Deeper input is kept as text and parsing stops."
            ),
            default=DEFAULT_MAX_DEPTH,
            ge=1
        )
    ]

    @field_validator("options_suffix", mode="after")
    @classmethod
    def lower_suffix(cls, v: str) -> str:
        return v.lower()
