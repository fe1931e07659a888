"""
Runtime configuration for Agebmi.

Read from environment variables; provides singleton access.
"""

import os
from typing import Optional

LOG_FORMATS = ("text", "json")


class AgebmiConfig:
  """Configuration for logging and the HTTP server."""

  def __init__(self):
    self.log_level = os.environ.get("AGEBMI_LOG_LEVEL", "INFO").upper()
    self.log_format = os.environ.get("AGEBMI_LOG_FORMAT", "text").lower()
    self.host = os.environ.get("AGEBMI_HOST", "127.0.0.1")
    self.port = self._parse_port(os.environ.get("AGEBMI_PORT", "8000"))
    self.cors_origins = [
      origin.strip()
      for origin in os.environ.get("AGEBMI_CORS_ORIGINS", "*").split(",")
      if origin.strip()
    ]

  @staticmethod
  def _parse_port(raw: str) -> int:
    try:
      port = int(raw)
    except ValueError:
      raise ValueError(f"AGEBMI_PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
      raise ValueError(f"AGEBMI_PORT out of range: {port}")
    return port

  def validate(self) -> None:
    """Raise error if the configuration is unusable."""
    if self.log_format not in LOG_FORMATS:
      raise ValueError(
        f"AGEBMI_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {self.log_format!r}"
      )


# -----------------------------------------------------------------------------
# Singleton instance
# -----------------------------------------------------------------------------

_config: Optional[AgebmiConfig] = None


def get_config() -> AgebmiConfig:
  """Get the configuration (singleton)."""
  global _config
  if _config is None:
    config = AgebmiConfig()
    config.validate()
    _config = config
  return _config


def reset_config() -> None:
  """Reset the configuration singleton (useful for testing)."""
  global _config
  _config = None
