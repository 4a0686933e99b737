"""Website generation orchestrator.

Order of operations for every request:

1. load the caller's subscription and refuse blocked or out-of-credit accounts
2. call the AI provider (failures charge nothing)
3. parse the response into ``{html, css}`` (failures charge nothing)
4. charge one generation through the usage ledger
5. append the generation log row
"""

import json
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.ai import GenerateRequest, GeneratedWebsite, RegenerateSectionRequest
from app.services.account_service import account_service
from app.services.ai.prompts import WEBSITE_SYSTEM_PROMPT, build_section_prompt, build_site_prompt
from app.services.ai.provider import AIProvider, ai_provider
from app.services.ai.response_parser import parse_website
from app.services.auth.credentials import TokenClaims
from app.services.subscription import SubscriptionService, subscription_service
from app.services.usage_service import UsageService, usage_service
from app.utils.constants import (
    CREATE_TEMPERATURE,
    GENERATION_MAX_TOKENS,
    SECTION_EDIT_TEMPERATURE,
)
from app.utils.exceptions import PaymentRequiredError, QuotaExceededError

logger = logging.getLogger(__name__)

SECTION_PARSE_FAILED_MESSAGE = "Failed to update website section. Please try again."
CONSUME_REFUSED_MESSAGE = "AI generation limit reached. Upgrade your plan for more generations."


class GenerationService:
    def __init__(
        self,
        provider: AIProvider,
        subscriptions: SubscriptionService,
        usage: UsageService,
    ):
        self.provider = provider
        self.subscriptions = subscriptions
        self.usage = usage

    async def check_access(self, db: AsyncSession, user: TokenClaims) -> None:
        """Raise unless the caller may start a generation right now."""
        account = await account_service.get(db, user.id)
        decision = self.subscriptions.decide(account)

        if decision.is_blocked:
            logger.info(f"Generation refused for user {user.id}: subscription {decision.status}")
            raise PaymentRequiredError(decision.as_dict())
        if not decision.can_use_ai:
            logger.info(f"Generation refused for user {user.id}: no credits left on {decision.plan_type}")
            raise QuotaExceededError(decision.as_dict())

    async def generate(self, db: AsyncSession, user: TokenClaims, request: GenerateRequest) -> dict:
        return await self._run(
            db,
            user,
            logged_prompt=request.prompt,
            user_prompt=build_site_prompt(request),
            temperature=CREATE_TEMPERATURE,
        )

    async def regenerate_section(
        self,
        db: AsyncSession,
        user: TokenClaims,
        request: RegenerateSectionRequest,
    ) -> dict:
        return await self._run(
            db,
            user,
            logged_prompt=f"Regenerate {request.section_name}: {request.instructions}",
            user_prompt=build_section_prompt(request),
            temperature=SECTION_EDIT_TEMPERATURE,
            previous=GeneratedWebsite(html=request.current_html, css=request.current_css),
            parse_failure_message=SECTION_PARSE_FAILED_MESSAGE,
        )

    async def _run(
        self,
        db: AsyncSession,
        user: TokenClaims,
        *,
        logged_prompt: str,
        user_prompt: str,
        temperature: float,
        previous: GeneratedWebsite | None = None,
        parse_failure_message: str | None = None,
    ) -> dict:
        await self.check_access(db, user)

        # No transaction stays open across the provider call
        await db.commit()

        raw = await self.provider.complete(
            WEBSITE_SYSTEM_PROMPT,
            user_prompt,
            max_tokens=GENERATION_MAX_TOKENS,
            temperature=temperature,
        )
        website = parse_website(raw, previous, parse_failure_message)

        if not await self.usage.try_consume(db, user.id):
            decision = await self.subscriptions.get_status(db, user.id)
            raise QuotaExceededError(decision.as_dict(), CONSUME_REFUSED_MESSAGE)

        tokens_used = self.usage.estimate_tokens(logged_prompt)
        await self.usage.log_generation(
            db,
            user.id,
            prompt=logged_prompt,
            result=json.dumps({"html": website.html, "css": website.css}),
            tokens_used=tokens_used,
        )
        usage = await self.usage.get_usage(db, user.id)

        logger.info(
            f"Generated website for user {user.id} "
            f"({len(website.html)} chars html, {tokens_used} tokens, {usage['used']}/{usage['limit']})"
        )
        return {"result": website, "tokens_used": tokens_used, "usage": usage}


# Global instance
generation_service = GenerationService(ai_provider, subscription_service, usage_service)
