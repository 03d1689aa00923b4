"""Push notification infrastructure providers."""

from dishka import Scope, provide

from summit.adapter.expo import ExpoPushSender
from summit.config import PushSettings
from summit.domain.service import PushSender
from summit.util.di.base import ProviderBase


class PushProvider(ProviderBase):
    """Push component base."""

    __mock_component__ = "push"


class ProdPushProvider(PushProvider):
    """Production push provider using the Expo push service."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_push_sender(self, settings: PushSettings) -> PushSender:
        return ExpoPushSender(settings)
