"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks ARYTMOS_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Parser: domyślnie nadmiarowe tokeny po wyrażeniu są ignorowane ("2+3)" == 5)
    strict_trailing_input: bool = False

    # Logging (DEBUG = ślad tokenów i odwiedzin węzłów)
    log_level: str = "WARNING"

    # REPL
    prompt: str = "expr> "
    show_steps: bool = False

    # App
    app_title: str = "Arytmos"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="ARYTMOS_", env_file=".env", extra="ignore")
