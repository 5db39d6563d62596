import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Upstream Torre.ai endpoints
    torre_search_url: str = "https://search.torre.co/people/_search"
    torre_analyze_url: str = "https://search.torre.co/people/_analyze"
    torre_search_stream_url: str = "https://torre.ai/api/entities/_searchStream"
    torre_bios_url: str = "https://torre.ai/api/genome/bios/"
    user_agent: str = "Mozilla/5.0 (compatible; TorreAnalysisBot/1.0)"
    request_timeout_seconds: float = 15.0

    # Distribution pipeline
    search_delay_seconds: float = 0.2  # courtesy pause after each sequential search
    distribution_concurrent: bool = False  # if True, fan out variants with asyncio.gather
    rederive_base_skill: bool = True  # strip decorations from the query text instead of reusing the input skill

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    rate_limit: str = "30/minute"
    rate_limit_enabled: bool = True
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
