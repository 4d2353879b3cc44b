# SPDX-License-Identifier: LicenseRef-CubeAlarm-Custom-Attribution
# Copyright (c) 2025 Paul Shapiro
"""Settings for the cube telemetry service, read from the environment."""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional, Union

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5001
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class ServerConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: Union[str, List[str]] = "*"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ServerConfig':
        """Build a config from SMARTCUBE_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        port_value = env.get("SMARTCUBE_PORT", str(DEFAULT_PORT))
        try:
            port = int(port_value)
        except ValueError:
            raise ValueError(f"SMARTCUBE_PORT must be an integer, got {port_value!r}") from None
        if not 0 < port < 65536:
            raise ValueError(f"SMARTCUBE_PORT out of range: {port}")

        origins = env.get("SMARTCUBE_CORS_ORIGINS", "*")
        cors_origins: Union[str, List[str]] = origins
        if origins != "*":
            cors_origins = [o.strip() for o in origins.split(",") if o.strip()]

        return cls(
            host=env.get("SMARTCUBE_HOST", DEFAULT_HOST),
            port=port,
            log_level=env.get("SMARTCUBE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            cors_origins=cors_origins,
        )
