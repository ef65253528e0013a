"""Configuration models"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class RuntimeSettings(BaseModel):
    """Settings applied when creating Lua environments"""

    sandbox: bool = Field(
        default=True,
        description="Remove io, os, debug, loadfile, dofile and require from new runtimes",
    )
    log_level: LogLevel = Field(default="INFO", description="Console log level")
    log_file: Optional[str] = Field(
        default=None, description="Optional log file path"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def empty_log_file_is_none(cls, v: object) -> object:
        if v == "":
            return None
        return v
