"""
Configuration module for environment variable validation and type-safe config.

Values are read once from the environment and exposed through a
module-level singleton returned by get_config().
"""
import os
from dataclasses import dataclass
from typing import Optional


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str = "us-east-1"
    aws_profile: Optional[str] = None
    ecs_endpoint: Optional[str] = None
    request_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If environment variables are invalid.
        """
        aws_region = os.environ.get("AWS_REGION", "us-east-1")
        aws_profile = os.environ.get("AWS_PROFILE") or None

        ecs_endpoint = os.environ.get("ECS_ENDPOINT") or None
        if ecs_endpoint:
            if not ecs_endpoint.startswith(("http://", "https://")):
                raise ValueError(
                    f"ECS_ENDPOINT must start with http:// or https://, got: {ecs_endpoint}"
                )
            ecs_endpoint = ecs_endpoint.rstrip("/")

        raw_timeout = os.environ.get("AWS_REQUEST_TIMEOUT", "30")
        try:
            request_timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"AWS_REQUEST_TIMEOUT must be a number, got: {raw_timeout}"
            )
        if request_timeout <= 0:
            raise ValueError(
                f"AWS_REQUEST_TIMEOUT must be positive, got: {raw_timeout}"
            )

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}"
            )

        return cls(
            aws_region=aws_region,
            aws_profile=aws_profile,
            ecs_endpoint=ecs_endpoint,
            request_timeout=request_timeout,
            log_level=log_level,
        )


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
