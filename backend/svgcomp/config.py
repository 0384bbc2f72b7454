"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgcomp_env: str = "development"
    svgcomp_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Code formatting (JSX path only)
    print_width: int = 80
    formatter_command: str = ""  # e.g. "npx prettier"; empty → built-in tidy
    formatter_timeout: float = 10.0

    # Vue: bind size/color into the template instead of passing markup through
    vue_bind_props: bool = True

    default_frameworks: list[str] = ["react"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
