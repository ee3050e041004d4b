from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class DecoderSettings(BaseSettings):
    # Reject payloads longer than the family layout instead of ignoring trailing bytes.
    strict_length: bool = Field(False, validation_alias="SWITCHLINK_STRICT_LENGTH")

    log_level: str = Field("INFO", validation_alias="SWITCHLINK_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="SWITCHLINK_LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
