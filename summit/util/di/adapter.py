"""Adapter DI providers (non-mockable, no external I/O)."""

from dishka import Scope, provide

from summit.adapter.badge import PillowBadgeRenderer
from summit.adapter.image import PillowImageNormalizer
from summit.domain.service import BadgeRenderer, ImageNormalizer
from summit.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Local image rendering adapters."""

    scope = Scope.APP

    @provide
    def get_badge_renderer(self) -> BadgeRenderer:
        return PillowBadgeRenderer()

    @provide
    def get_image_normalizer(self) -> ImageNormalizer:
        return PillowImageNormalizer()
