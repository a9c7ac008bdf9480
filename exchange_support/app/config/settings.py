from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    registry_backend: str = Field("memory", validation_alias="REGISTRY_BACKEND")
    type_converter_backend: str = Field("default", validation_alias="TYPE_CONVERTER_BACKEND")

    # Kept as raw text; parsed when the default exchange formatter is built.
    log_debug_body_max_chars: str | None = Field(None, validation_alias="LOG_DEBUG_BODY_MAX_CHARS")
    global_options: dict[str, str] = Field(default_factory=dict, validation_alias="GLOBAL_OPTIONS")
