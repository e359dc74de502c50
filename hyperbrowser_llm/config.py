"""
Configuration module for the crawl and extraction tool.
"""

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class CrawlerConfig(BaseModel):
    """Crawl service configuration settings."""

    api_key: Optional[str] = Field(
        default=os.getenv("HYPERBROWSER_API_KEY"),
        description="API key for the hosted crawler",
    )
    base_url: str = Field(
        default=os.getenv("HYPERBROWSER_BASE_URL", "https://app.hyperbrowser.ai"),
        description="Base URL of the crawler API",
    )
    max_pages: int = Field(
        default=int(os.getenv("CRAWL_MAX_PAGES", "1000")),
        description="Maximum number of pages a crawl job may visit",
    )
    batch_size: int = Field(
        default=int(os.getenv("CRAWL_BATCH_SIZE", "10")),
        description="Number of pages requested per result batch",
    )
    poll_interval: float = Field(
        default=float(os.getenv("CRAWL_POLL_INTERVAL", "5.0")),
        description="Seconds to wait between job status checks",
    )
    max_polls: Optional[int] = Field(
        default=_optional_int("CRAWL_MAX_POLLS"),
        description="Maximum number of status checks (unset for no limit)",
    )
    request_timeout: float = Field(
        default=float(os.getenv("CRAWL_REQUEST_TIMEOUT", "60")),
        description="HTTP request timeout in seconds",
    )


class LLMConfig(BaseModel):
    """LLM provider configuration settings."""

    api_key: Optional[str] = Field(
        default=os.getenv("OPENAI_API_KEY"),
        description="API key for the OpenAI API",
    )
    model: str = Field(
        default=os.getenv("DEFAULT_LLM_MODEL", "gpt-4o-mini"),
        description="Model used for product extraction",
    )
    temperature: Optional[float] = Field(
        default=_optional_float("LLM_TEMPERATURE"),
        description="Temperature for LLM generation (unset for provider default)",
    )


class AppConfig(BaseModel):
    """Main application configuration."""

    crawler: CrawlerConfig = Field(default_factory=CrawlerConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    log_level: str = Field(
        default=os.getenv("HYPERBROWSER_LLM_LOG_LEVEL", "INFO"),
        description="Logging level for the command-line tool",
        validate_default=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        level = str(value or "").upper()
        return level if level in LOG_LEVELS else "INFO"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary."""
        return {
            "crawler": self.crawler.model_dump(),
            "llm": self.llm.model_dump(),
            "log_level": self.log_level,
        }


# Create a singleton instance of the configuration
config = AppConfig()


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    return config
