"""Single-food lookup by FoodData Central id."""

import asyncio
import logging
from dataclasses import dataclass

from food_search.adapters.fdc_client import FdcClient
from food_search.domain.foods import FoodItem
from food_search.services.formatting import to_food_item
from food_search.services.names import simplify_name
from food_search.services.providers import parse_fdc_food, status_code_from_exception

_logger = logging.getLogger(__name__)


@dataclass
class FoodDetailsService:
    """Fetch one FDC food as a display-ready item."""

    fdc_client: FdcClient
    timeout_seconds: float = 8.0
    debug: bool = False

    async def get_food_details(self, fdc_id: int) -> FoodItem | None:
        """Return the food, or None when it is missing or carries no macros."""
        try:
            payload = await asyncio.wait_for(
                self.fdc_client.get_food(fdc_id), timeout=self.timeout_seconds
            )
            candidate = parse_fdc_food(payload)
        except Exception as exc:
            _logger.warning(
                "Food details fdc_id=%s failed (status=%s): %s",
                fdc_id,
                status_code_from_exception(exc),
                repr(exc),
            )
            return None
        if (
            candidate is None
            or candidate.macros.is_empty
            or not candidate.macros.is_plausible
        ):
            if self.debug:
                _logger.info("Food details fdc_id=%s has no usable macros", fdc_id)
            return None
        return to_food_item(simplify_name(candidate.description), candidate)
