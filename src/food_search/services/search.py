"""Food search orchestration over an ordered chain of providers."""

import asyncio
import logging
from dataclasses import dataclass

from food_search.domain.foods import FoodItem, RawCandidate, ScoredCandidate
from food_search.services.formatting import to_food_item
from food_search.services.names import simplify_name
from food_search.services.normalizer import clean_query, normalize_query
from food_search.services.providers import FoodProvider, status_code_from_exception
from food_search.services.scoring import quality_adjustment, score_name
from food_search.services.similarity import deduplicate

MAX_RESULTS = 8

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Ranks, simplifies and deduplicates foods from the first useful provider."""

    providers: list[FoodProvider]
    timeout_seconds: float = 8.0
    result_limit: int = MAX_RESULTS
    debug: bool = False

    async def search(self, query: str) -> list[FoodItem]:
        """Return up to eight ranked foods for a free-text query.

        Providers are tried in order and the first one that yields a usable
        candidate wins. Provider errors and timeouts fall through to the next
        provider; when none succeeds the result is empty.
        """
        cleaned = clean_query(query)
        if not cleaned:
            return []
        normalized = normalize_query(cleaned)
        if self.debug and normalized != cleaned:
            _logger.info("Food search query rewritten: %s -> %s", cleaned, normalized)

        for provider in self.providers:
            lookup_query = normalized if provider.uses_normalized_query else cleaned
            candidates = await self._lookup(provider, lookup_query)
            if not candidates:
                continue
            items = self._rank(provider, candidates, cleaned)
            if self.debug:
                _logger.info(
                    "Food search %s: query=%s candidates=%s results=%s",
                    provider.name,
                    cleaned,
                    len(candidates),
                    len(items),
                )
            return items

        if self.debug:
            _logger.info("Food search found nothing: query=%s", cleaned)
        return []

    async def _lookup(self, provider: FoodProvider, query: str) -> list[RawCandidate]:
        """Return usable candidates from one provider, or nothing on failure."""
        try:
            candidates = await asyncio.wait_for(
                provider.lookup(query), timeout=self.timeout_seconds
            )
        except Exception as exc:
            _logger.warning(
                "Food search %s failed (status=%s): %s",
                provider.name,
                status_code_from_exception(exc),
                repr(exc),
            )
            return []
        return [
            candidate
            for candidate in candidates
            if candidate.macros.is_plausible and not candidate.macros.is_empty
        ]

    def _rank(
        self, provider: FoodProvider, candidates: list[RawCandidate], query: str
    ) -> list[FoodItem]:
        scored = [
            ScoredCandidate(
                candidate=candidate,
                simplified_name=simplify_name(candidate.description),
                score=self._score(provider, candidate, query),
                source_provider=provider.name,
            )
            for candidate in candidates
        ]
        scored.sort(key=lambda item: item.score, reverse=True)
        limit = max(0, min(self.result_limit, MAX_RESULTS))
        return [
            to_food_item(item.simplified_name, item.candidate)
            for item in deduplicate(scored)[:limit]
        ]

    @staticmethod
    def _score(provider: FoodProvider, candidate: RawCandidate, query: str) -> int:
        score = score_name(candidate.description, query)
        if provider.rewards_data_quality:
            score += quality_adjustment(candidate)
        return score
