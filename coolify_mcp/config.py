from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Coolify instance root, without the /api/v1 prefix
    base_url: str = "http://localhost:8000"

    # Bearer token created under Keys & Tokens in the Coolify UI
    api_token: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="COOLIFY_",
        extra="ignore",
    )
