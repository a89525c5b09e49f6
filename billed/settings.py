import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BILLED_", extra="ignore")

    store_backend: str = "api"

    api_url: str = "http://localhost:5678"
    api_timeout: float | None = None

    local_storage_path: str = "./.billed/local_storage.json"

    db_url: str = "sqlite:///billed.db"

    storage_backend: str = "local"
    storage_local_path: str = "./uploads"
    storage_prefix: str = "bills"

    s3_bucket: str = ""
    s3_region: str = ""
    s3_access_key_id: str = ""
    s3_secret_access_key: str = ""
    s3_endpoint_url: str = ""
    s3_presigned_expiry: int = 604800  # 7 days in seconds

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
