"""Translation lookup settings."""

from pydantic import Field, field_validator

from langline.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Configuration for translation discovery, fallback and formatting.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale a new translator starts with (default: "en")
        I18N_FALLBACK_LOCALE: Last locale tried before echoing the key (default: "en")
        I18N_SEARCH_PATHS: JSON list of base directories, searched in order
        I18N_RESOURCE_DIR: Directory under each search path holding locale folders
        I18N_FILE_EXTENSIONS: JSON list of file extensions, tried in order
        I18N_FORMATTING_ENABLED: Allow ICU message formatting when PyICU is installed

    Layout:
        <search path>/<resource dir>/<locale>/<source><extension>

        e.g. ./translations/fr-FR/validation.yml

    Example:
        ```python
        from langline.configuration import get_settings

        settings = get_settings()
        paths = settings.i18n.search_paths
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale a new translator starts with",
    )
    fallback_locale: str = Field(
        default="en",
        alias="I18N_FALLBACK_LOCALE",
        description="Last locale of the fallback chain",
    )
    search_paths: list[str] = Field(
        default_factory=lambda: ["."],
        alias="I18N_SEARCH_PATHS",
        description="Base directories searched for translation files, in order",
    )
    resource_dir: str = Field(
        default="translations",
        alias="I18N_RESOURCE_DIR",
        description="Directory under each search path that holds locale folders",
    )
    file_extensions: list[str] = Field(
        default_factory=lambda: [".yml", ".yaml", ".json"],
        alias="I18N_FILE_EXTENSIONS",
        description="Translation file extensions, tried in order",
    )
    formatting_enabled: bool = Field(
        default=True,
        alias="I18N_FORMATTING_ENABLED",
        description="Use ICU message formatting when PyICU is available",
    )

    @field_validator("file_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]
