from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	"""Runtime settings, overridable with ``EZPARSE_*`` environment variables."""

	# Reading
	encoding: str = "utf-8"
	source_suffixes: List[str] = [".ez"]

	# API server
	host: str = "127.0.0.1"
	port: int = 8000

	log_level: str = "WARNING"

	model_config = SettingsConfigDict(
		env_prefix="EZPARSE_",
		env_file=".env",
		env_file_encoding="utf-8",
		extra="ignore",
	)


@lru_cache()
def get_settings() -> Settings:
	return Settings()
