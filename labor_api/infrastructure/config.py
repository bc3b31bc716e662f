# labor_api/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

_TAX_ID_SCOPES = ("principal", "global")


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    admin_role: str
    contractor_tax_id_scope: str
    cors_origins: tuple[str, ...]
    log_level: str
    debug: bool

    @property
    def global_tax_id(self) -> bool:
        return self.contractor_tax_id_scope == "global"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    scope = os.environ.get("CONTRACTOR_TAX_ID_SCOPE", "principal").strip().lower()
    if scope not in _TAX_ID_SCOPES:
        raise ValueError(
            f"invalid CONTRACTOR_TAX_ID_SCOPE {scope!r}, expected one of {_TAX_ID_SCOPES}"
        )
    origins = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        admin_role=os.environ.get("ADMIN_ROLE_NAME", "Administrador"),
        contractor_tax_id_scope=scope,
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
