from typing import Annotated, ClassVar, override

from pydantic import AfterValidator, BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from esquery.config.utils import CommentedSettings
from esquery.types.general import LogLevel
from esquery.types.query import SortDirection


def uppercase(value: str) -> str:
    """Make a string uppercase."""
    return value.upper()


class QuerySettings(BaseModel):
    """Defaults applied by the query builder when a caller omits a value."""

    default_size: Annotated[
        int, Field(description="Result size used when size() is called without one.")
    ] = 20
    default_from: Annotated[
        int,
        Field(description="Result offset used when from_() is called without one."),
    ] = 0
    default_sort_direction: Annotated[
        SortDirection,
        Field(description="Sort order used when sort() is called without one."),
    ] = "desc"


class GeneralConfig(CommentedSettings):
    """General library config."""

    log_level: Annotated[
        LogLevel,
        AfterValidator(uppercase),
    ] = Field(
        default="INFO",
        description="Level of library logs to print.",
    )
    query: QuerySettings = QuerySettings()

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(  # pyright:ignore[reportIncompatibleVariableOverride] This is the intended pattern
        case_sensitive=False,
        env_prefix="ESQUERY_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        yaml_file="config/esquery.yaml",
        yaml_file_encoding="utf-8",
    )

    @classmethod
    @override
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Ensure proper setting priority order."""
        return (
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            init_settings,
        )


CONFIG = GeneralConfig()
