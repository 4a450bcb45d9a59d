import os
from typing import Any, Dict, List, Literal, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_BASE_URL = "https://api.sendzen.io/v1/messages"
DEFAULT_TIMEOUT_MS = 30000

LogCategory = Literal["request", "response", "error", "debug"]

class DeveloperOptions(BaseModel):
    """
    Controls what the transport logs. Logging never changes what is sent.

    When ``logs`` is non-empty the ``enable_*_logging`` flags are derived
    from it and any explicit flag values are ignored.
    """
    model_config = ConfigDict(frozen=True)

    logs: List[LogCategory] = Field(default_factory=list, description="Categories to log")
    log_level: Literal["debug", "info", "warn", "error"] = Field("info", description="Minimum level to emit")
    log_format: Literal["json", "pretty"] = Field("pretty", description="How log records are rendered")
    enable_request_logging: bool = False
    enable_response_logging: bool = False
    enable_error_logging: bool = False
    enable_debug_logging: bool = False

    @model_validator(mode="before")
    @classmethod
    def _derive_flags_from_logs(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        logs = values.get("logs")
        if logs:
            values = dict(values)
            values["enable_request_logging"] = "request" in logs
            values["enable_response_logging"] = "response" in logs
            values["enable_error_logging"] = "error" in logs
            values["enable_debug_logging"] = "debug" in logs
        return values

    def with_overrides(self, **overrides) -> "DeveloperOptions":
        values = self.model_dump()
        if "logs" in overrides:
            # flags follow the new logs list unless given explicitly
            for flag in ("enable_request_logging", "enable_response_logging",
                         "enable_error_logging", "enable_debug_logging"):
                values.pop(flag)
        values.update(overrides)
        return DeveloperOptions.model_validate(values)

class RequestOptions(BaseModel):
    timeout: Optional[int] = Field(None, description="Per-call timeout in milliseconds")
    headers: Optional[Dict[str, str]] = Field(None, description="Per-call extra headers")

class SendZenConfig(BaseModel):
    """
    Immutable client configuration. Use ``with_overrides`` to derive a new one.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(..., description="SendZen API key")
    from_number: str = Field(..., alias="from", description="Default sender phone number")
    timeout: int = Field(DEFAULT_TIMEOUT_MS, description="Request timeout in milliseconds")
    headers: Dict[str, str] = Field(default_factory=dict, description="Headers added to every request")
    base_url: str = Field(DEFAULT_BASE_URL, description="Gateway messages endpoint")
    developer_options: DeveloperOptions = Field(default_factory=DeveloperOptions)

    def with_overrides(self, **overrides) -> "SendZenConfig":
        values = self.model_dump()
        if "from" in overrides:
            overrides["from_number"] = overrides.pop("from")
        values.update(overrides)
        return SendZenConfig.model_validate(values)

    @classmethod
    def from_env(
        cls,
        environment_path: Optional[str] = None,
        **overrides
    ) -> "SendZenConfig":
        """
        Build a config from environment variables, loading ``environment_path``
        (a dotenv file) first when given.

        Reads SENDZEN_API_KEY, SENDZEN_FROM_NUMBER, SENDZEN_TIMEOUT and SENDZEN_BASE_URL.
        """
        if environment_path is not None:
            load_dotenv(environment_path)
        values = {
            "api_key": os.getenv("SENDZEN_API_KEY", ""),
            "from_number": os.getenv("SENDZEN_FROM_NUMBER", ""),
        }
        env_timeout = os.getenv("SENDZEN_TIMEOUT")
        if env_timeout:
            values["timeout"] = int(env_timeout)
        env_base_url = os.getenv("SENDZEN_BASE_URL")
        if env_base_url:
            values["base_url"] = env_base_url
        values.update(overrides)
        return cls.model_validate(values)
