"""Per-element interception of data-bound text."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from ..text import ensure_direction, fix_direction
from .contracts import BindingLike, ReportLike, Subscription

logger = logging.getLogger(__name__)


class InterceptorState(str, Enum):
    ARMED = "armed"
    ACTIVE = "active"
    DISARMED = "disarmed"


class BindingInterceptor:
    """
    Rewrites the text of one data-bound element each time it is about to render.

    The interceptor subscribes itself to the element's before-render hook and
    keeps the returned subscription so it can cancel it from inside its own
    handler. It stays active while the bound member resolves to strings (or
    names a report parameter) and disarms for the rest of the render pass on
    the first non-string value.
    """

    def __init__(
        self,
        report: ReportLike,
        element: Any,
        binding: BindingLike,
        *,
        skip_wrapped: bool = True,
    ):
        self.report = report
        self.element = element
        self.binding = binding
        self.skip_wrapped = skip_wrapped
        self.state = InterceptorState.ARMED
        self.ticks = 0
        self._subscription: Optional[Subscription] = None

    @property
    def data_member(self) -> str:
        return self.binding.data_member

    @property
    def is_active(self) -> bool:
        return self.state is InterceptorState.ACTIVE

    def arm(self) -> "BindingInterceptor":
        if self.state is not InterceptorState.ARMED:
            return self
        self._subscription = self.element.before_render.subscribe(self)
        self.state = InterceptorState.ACTIVE
        return self

    def disarm(self) -> None:
        if self.state is InterceptorState.DISARMED:
            return
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        self.state = InterceptorState.DISARMED
        logger.debug("Disarmed interceptor for data member %r", self.data_member)

    def __call__(self, sender: Any = None) -> None:
        if not self.is_active:
            return
        self.ticks += 1
        try:
            self._on_before_render()
        except Exception as e:
            logger.warning("RTL fix failed for data member %r: %s", self.data_member, e)
            self.disarm()

    def _on_before_render(self) -> None:
        if self._is_parameter_bound():
            # The host already put the parameter value into the text
            wrap = ensure_direction if self.skip_wrapped else fix_direction
            self.element.text = wrap(self.element.text)
            return

        value = self._resolve_value()
        if isinstance(value, str):
            self.element.text = fix_direction(value)
        else:
            self.disarm()

    def _is_parameter_bound(self) -> bool:
        parameters = getattr(self.report, "parameters", None) or ()
        return any(getattr(p, "name", None) == self.data_member for p in parameters)

    def _resolve_value(self) -> Any:
        try:
            return self.report.get_current_column_value(self.data_member)
        except Exception as e:
            logger.debug("Could not resolve data member %r: %s", self.data_member, e)
            return None


class InterceptorRegistry:
    """Interceptors of one report, keyed by element identity."""

    def __init__(self) -> None:
        self._by_element: Dict[int, BindingInterceptor] = {}

    def __len__(self) -> int:
        return len(self._by_element)

    def get(self, element: Any) -> Optional[BindingInterceptor]:
        return self._by_element.get(id(element))

    def attach(
        self,
        report: ReportLike,
        element: Any,
        binding: BindingLike,
        *,
        skip_wrapped: bool = True,
    ) -> Optional[BindingInterceptor]:
        """
        Arm an interceptor for the element unless a live one already exists.

        A disarmed interceptor from an earlier render pass is replaced.

        Returns:
            The new interceptor, or None when the element was already covered
        """
        existing = self.get(element)
        if existing is not None and existing.is_active:
            return None
        interceptor = BindingInterceptor(report, element, binding, skip_wrapped=skip_wrapped).arm()
        self._by_element[id(element)] = interceptor
        return interceptor

    def active(self) -> List[BindingInterceptor]:
        return [i for i in self._by_element.values() if i.is_active]

    def disarm_all(self) -> None:
        for interceptor in list(self._by_element.values()):
            interceptor.disarm()
