from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 5000

    reconciliation_api_url: str = ""
    reconciliation_process_path: str = "/process"
    reconciliation_timeout_seconds: int = 120
    reconciliation_verify_tls: bool = True
    reconciliation_client: str = "httpx"

    result_default_file_name: str = "processed_data.csv"
    result_default_content_type: str = "text/csv"

    upload_max_files_per_role: int = 10
    upload_max_file_size_bytes: int = 50 * 1024 * 1024
