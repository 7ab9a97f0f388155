from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from nestodo.constants import DEFAULT_NAMESPACE
from nestodo.paths import LOG_PATH, STORE_PATH

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class NestodoConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    store_path: str = str(STORE_PATH)
    namespace: str = DEFAULT_NAMESPACE
    log_level: LogLevel = "INFO"
    log_path: str = str(LOG_PATH)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("namespace must not be empty")
        return v
