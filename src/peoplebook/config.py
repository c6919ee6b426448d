"""Settings from environment variables (and .env at repo root or cwd)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from peoplebook.application.ports import PersonRepository

BACKENDS = ("http", "neo4j", "memory")

# Repo root: from src/peoplebook/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    backend: str = "http"
    api_url: str = "http://localhost:8000"
    http_timeout: float = 10.0
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    log_level: str = "INFO"


def _load_env_file() -> None:
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Read settings. With environ=None the process environment (plus .env) is used."""
    if environ is None:
        _load_env_file()
        environ = dict(os.environ)

    def get(key: str, default: str) -> str:
        return (environ.get(key) or "").strip() or default

    backend = get("PEOPLEBOOK_BACKEND", "http").lower()
    if backend not in BACKENDS:
        raise ValueError(
            f"PEOPLEBOOK_BACKEND must be one of {', '.join(BACKENDS)}; got {backend!r}"
        )
    raw_timeout = get("PEOPLEBOOK_HTTP_TIMEOUT", "10")
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(
            f"PEOPLEBOOK_HTTP_TIMEOUT must be a number; got {raw_timeout!r}"
        ) from None
    if timeout <= 0:
        raise ValueError("PEOPLEBOOK_HTTP_TIMEOUT must be positive.")

    return Settings(
        backend=backend,
        api_url=get("PEOPLEBOOK_API_URL", "http://localhost:8000"),
        http_timeout=timeout,
        neo4j_uri=get("NEO4J_URI", "bolt://localhost:7687"),
        neo4j_user=get("NEO4J_USER", "neo4j"),
        neo4j_password=get("NEO4J_PASSWORD", "password"),
        log_level=get("PEOPLEBOOK_LOG_LEVEL", "INFO").upper(),
    )


def build_repository(settings: Settings) -> PersonRepository:
    """Create the repository binding named by settings.backend."""
    if settings.backend == "memory":
        from peoplebook.infrastructure import InMemoryPersonRepository

        return InMemoryPersonRepository()
    if settings.backend == "neo4j":
        from neo4j import AsyncGraphDatabase

        from peoplebook.infrastructure import Neo4jPersonRepository

        driver = AsyncGraphDatabase.driver(
            settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
        )
        return Neo4jPersonRepository(driver)
    from peoplebook.infrastructure import HttpPersonRepository

    return HttpPersonRepository(settings.api_url, timeout=settings.http_timeout)
