from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ----------------------------
# General / App settings
# ----------------------------
class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WIREBOX_", extra="ignore")

    app_name: str = "wirebox"

    # Logger
    log_file: str = ""  # empty: console only
    log_level: str = "WARNING"
    json_logs: bool = False


# ----------------------------
# Container settings
# ----------------------------
class ContainerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WIREBOX_CONTAINER_", extra="ignore")

    thread_safe: bool = True
    track_retrievals: bool = True


# ----------------------------
# Top-level settings
# ----------------------------
class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=AppSettings)
    container: ContainerSettings = Field(default_factory=ContainerSettings)
