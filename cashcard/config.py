"""Application configuration"""

from dataclasses import dataclass, field
from os import getenv
from pathlib import Path


@dataclass
class Config:
    secret_key: str | None = field(default=getenv("CASHCARD_SECRET_KEY", ""))

    app_name: str = "cashcard"
    app_version: str = "0.1.0"

    # lifetime of issued X-Token values
    token_ttl_hours: int = field(
        default=int(getenv("CASHCARD_TOKEN_TTL_HOURS", 24 * 28))
    )
    # upper bound for the "size" query parameter of list requests
    max_page_size: int = field(default=int(getenv("CASHCARD_MAX_PAGE_SIZE", 2000)))

    # Optional database URL for Postgres or other databases
    database_url_env: str | None = field(default=getenv("CASHCARD_DATABASE_URL", None))

    @property
    def database_path(self) -> Path:
        return Path("./data/") / Path(f"{self.app_name}.db")

    @property
    def database_url(self) -> str:
        # Use provided DATABASE_URL if available, else fall back to SQLite file
        if self.database_url_env:
            return self.database_url_env
        return f"sqlite:///{self.database_path}"


def get_config():
    return Config()
