from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ECHO_",
        env_file=".env",
        extra="ignore",
    )

    # Logging ("DEBUG" enables debug output and stack traces)
    MODE: str = "PRODUCTION"

    # AWS
    AWS_REGION: str = "eu-central-1"

    # GCP
    GCP_PROJECT: str = ""
    GCP_REGION: str = "europe-west1"

    # Invocation
    HTTP_TIMEOUT: int = 30

    # Packaging / infrastructure
    BUILD_DIR: str = ".build"
    INFRASTRUCTURE_DIR: str = "infrastructure"
    FUNCTION_NAME_PREFIX: str = "multicloud-echo"

    @property
    def debug_mode(self) -> bool:
        return self.MODE.upper() == "DEBUG"


@lru_cache
def get_settings() -> Settings:
    return Settings()
