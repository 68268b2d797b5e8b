"""
Application Configuration - Environment Variable Management.
Loads and validates configuration from .env file.
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from project root
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

if ENV_FILE.exists():
    load_dotenv(ENV_FILE)
    logger.info(f"Loaded environment from {ENV_FILE}")
else:
    logger.warning(f".env file not found at {ENV_FILE}")


def _is_configured(key: Optional[str]) -> bool:
    return bool(key and not key.startswith("PASTE_"))


@dataclass
class AIConfig:
    """External generative services configuration."""
    groq_api_key: Optional[str] = None
    perplexity_api_key: Optional[str] = None
    replicate_api_token: Optional[str] = None

    # Text completion (OpenAI-compatible endpoint)
    llm_base_url: str = "https://api.groq.com/openai/v1"
    llm_model: str = "llama-3.1-70b-versatile"

    # Web-search augmented completion
    research_url: str = "https://api.perplexity.ai/chat/completions"
    research_model: str = "llama-3.1-sonar-huge-128k-online"

    # Image inference
    image_base_url: str = "https://api.replicate.com/v1"
    image_model: str = "black-forest-labs/flux-dev"

    http_timeout: float = 120.0

    @property
    def has_llm(self) -> bool:
        return _is_configured(self.groq_api_key)

    @property
    def has_research(self) -> bool:
        return _is_configured(self.perplexity_api_key)

    @property
    def has_images(self) -> bool:
        return _is_configured(self.replicate_api_token)

    @property
    def ready(self) -> bool:
        return self.has_llm and self.has_research and self.has_images


@dataclass
class AppConfig:
    """Main Application Configuration."""
    ai: AIConfig
    debug: bool = False

    def validate(self) -> dict:
        """Validate configuration and return status."""
        return {
            "ai": {
                "llm_configured": self.ai.has_llm,
                "research_configured": self.ai.has_research,
                "images_configured": self.ai.has_images,
            },
            "models": {
                "llm": self.ai.llm_model,
                "research": self.ai.research_model,
                "images": self.ai.image_model,
            },
            "ready_for_podcast": self.ai.ready,
        }

    def log_status(self):
        """Log configuration status (without exposing keys)."""
        status = self.validate()

        logger.info("=" * 50)
        logger.info("Configuration Status:")
        logger.info(f"  Text completion API: {'OK' if status['ai']['llm_configured'] else 'NOT CONFIGURED'} ({self.ai.llm_model})")
        logger.info(f"  Research API: {'OK' if status['ai']['research_configured'] else 'NOT CONFIGURED'} ({self.ai.research_model})")
        logger.info(f"  Image API: {'OK' if status['ai']['images_configured'] else 'NOT CONFIGURED'} ({self.ai.image_model})")
        logger.info("=" * 50)

        if not status["ready_for_podcast"]:
            logger.warning("Not every external service is configured - podcast requests will fail")


def load_config() -> AppConfig:
    """Load configuration from environment variables."""
    ai_config = AIConfig(
        groq_api_key=os.getenv("GROQ_API_KEY"),
        perplexity_api_key=os.getenv("PERPLEXITY_API_KEY"),
        replicate_api_token=os.getenv("REPLICATE_API_TOKEN"),
        llm_base_url=os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1"),
        llm_model=os.getenv("LLM_MODEL", "llama-3.1-70b-versatile"),
        research_model=os.getenv("RESEARCH_MODEL", "llama-3.1-sonar-huge-128k-online"),
        image_model=os.getenv("IMAGE_MODEL", "black-forest-labs/flux-dev"),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "120")),
    )

    return AppConfig(
        ai=ai_config,
        debug=os.getenv("DEBUG", "false").lower() == "true",
    )


# Global config instance
config = load_config()
