from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=(os.getenv("HOST") or "0.0.0.0").strip(),
            port=int((os.getenv("PORT") or "3000").strip()),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        )

    @property
    def public_url(self) -> str:
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"


__all__ = ["Settings"]
