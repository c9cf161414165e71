"""Registrable "about to render" hooks."""

from __future__ import annotations

from typing import Any, List, Tuple

from ..core.contracts import Handler


class HookSubscription:
    """Returned by Hook.subscribe; cancelling removes the handler."""

    def __init__(self, hook: "Hook", handler: Handler):
        self.hook = hook
        self.handler = handler
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self.hook._remove(self)


class Hook:
    """
    Ordered list of handlers called with the sender when the hook fires.

    Handlers cancelled while the hook is firing (their own subscription
    included) are not called again, not even later in the same firing.
    """

    def __init__(self) -> None:
        self._subscriptions: List[HookSubscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        return tuple(s.handler for s in self._subscriptions)

    def subscribe(self, handler: Handler) -> HookSubscription:
        if not callable(handler):
            raise TypeError(f"Hook handler must be callable, got {type(handler).__name__}")
        subscription = HookSubscription(self, handler)
        self._subscriptions.append(subscription)
        return subscription

    def fire(self, sender: Any = None) -> None:
        for subscription in tuple(self._subscriptions):
            if subscription.active:
                subscription.handler(sender)

    def _remove(self, subscription: HookSubscription) -> None:
        self._subscriptions = [s for s in self._subscriptions if s is not subscription]
