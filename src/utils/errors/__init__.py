"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ClientInputError,
    ConfigurationError,
    InfrastructureError,
    InternalError,
    MethodNotAllowedError,
    NetworkError,
    PayloadTooLargeError,
    RateLimitExceededError,
    RedisConnectionError,
    RelayError,
    UpstreamError,
)

__all__ = [
    "ClientInputError",
    "ConfigurationError",
    "InfrastructureError",
    "InternalError",
    "MethodNotAllowedError",
    "NetworkError",
    "PayloadTooLargeError",
    "RateLimitExceededError",
    "RedisConnectionError",
    "RelayError",
    "UpstreamError",
]
