from pydantic_settings import BaseSettings, SettingsConfigDict

from docindex.document_creators.abstract_classes import MAX_INPUT_SIZE_BYTES


class GlobalConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")
    opensearch_host: str = "localhost"
    opensearch_port: int = 9200
    use_ssl: bool = False
    verify_certs: bool = False
    # none | basic | aws
    auth_mode: str = "none"
    opensearch_username: str | None = None
    opensearch_password: str | None = None
    aws_region: str | None = None
    aws_service: str = "es"
    request_timeout: int = 60
    max_input_bytes: int = MAX_INPUT_SIZE_BYTES
    log_level: str = "INFO"


global_config = GlobalConfig()
