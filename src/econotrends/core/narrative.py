"""
EconoTrends Core - Narrative collaborator interface.

Narrative generators describe a finished forecast in prose. They read the
engine's output and never feed anything back into it. Hosted language-model
backends plug in behind NarrativeGenerator; TemplateNarrator is the
deterministic fallback used when none is configured.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from econotrends.core.models import ForecastResult, Indicator


@dataclass(frozen=True)
class Narrative:
    content: str
    confidence: float


class NarrativeGenerator(Protocol):
    def describe(self, indicator: Indicator, result: ForecastResult) -> Narrative:
        ...


class TemplateNarrator:
    """One-sentence summary built from the first and last forecast points."""

    confidence = 0.75

    def describe(self, indicator: Indicator, result: ForecastResult) -> Narrative:
        if not result.forecasts:
            return Narrative(
                content=f"No forecast is available for {indicator.name}.",
                confidence=0.0,
            )

        first = result.forecasts[0]
        last = result.forecasts[-1]
        if last.value > first.value:
            movement = "rise"
        elif last.value < first.value:
            movement = "decline"
        else:
            movement = "hold steady"

        content = (
            f"{indicator.name} is projected to {movement} over the next "
            f"{len(result.forecasts)} period(s), from {first.value:.2f} to {last.value:.2f} "
            f"({result.methodology.value} model). Watch related policy and market developments."
        )
        return Narrative(content=content, confidence=self.confidence)
