from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "System Health Check"
    log_level: str = "INFO"

    # --- output ---
    output_dir: str = "."
    report_prefix: str = "SystemHealthCheck"
    json_indent: int = 2

    # --- probes ---
    cpu_sample_interval: float = 1.0  # seconds spent sampling CPU load
    network_host: str = "8.8.8.8"
    network_port: int = 53
    network_timeout: float | None = None  # platform default
    update_timeout: float = 120.0

    # --- reporting ---
    allow_partial_report: bool = False

    model_config = {"env_file": ".env", "env_prefix": "HEALTHCHECK_"}


settings = Settings()
