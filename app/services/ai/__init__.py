"""AI website generation: provider client, prompts, response parsing and orchestration"""

from app.services.ai.generation_service import GenerationService, generation_service
from app.services.ai.provider import AIProvider, ai_provider
from app.services.ai.response_parser import ParseResult, parse_website

__all__ = [
    "AIProvider",
    "ai_provider",
    "GenerationService",
    "generation_service",
    "ParseResult",
    "parse_website",
]
