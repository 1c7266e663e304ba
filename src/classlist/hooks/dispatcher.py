"""Ordered class interception pipeline owned by a node."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterator, Union

from classlist.hooks.base import ClassInterceptor, InterceptorFunc, as_interceptor

logger = logging.getLogger("classlist")


@dataclass(frozen=True)
class ClassPayload:
    """What travels through the pipeline: a composition key and its classes."""

    property: str
    classes: dict[str, bool]


class ClassHook:
    """Synchronous interceptor chain for class maps.

    Interceptors run in registration order; each one sees the map produced
    by the previous one.  Plain functions are wrapped in
    :class:`FunctionInterceptor`.
    """

    def __init__(self) -> None:
        # (what the caller registered, what we call)
        self._entries: list[tuple[object, ClassInterceptor]] = []

    def use(
        self, interceptor: Union[ClassInterceptor, InterceptorFunc]
    ) -> ClassInterceptor:
        """Append an interceptor to the end of the chain and return it."""
        wrapped = as_interceptor(interceptor)
        self._entries.append((interceptor, wrapped))
        logger.debug("Registered class interceptor %r", interceptor)
        return wrapped

    def unuse(self, interceptor: object) -> None:
        """Remove an interceptor by what was passed to, or returned from, use().

        No-op if not registered.
        """
        before = len(self._entries)
        self._entries = [
            (key, wrapped)
            for key, wrapped in self._entries
            if key is not interceptor and wrapped is not interceptor
        ]
        if len(self._entries) != before:
            logger.debug("Removed class interceptor %r", interceptor)

    def dispatch(self, payload: ClassPayload) -> ClassPayload:
        """Run *payload* through every interceptor and return the result.

        Interceptors added or removed during a dispatch take effect on the
        next one.
        """
        for _, interceptor in list(self._entries):
            classes = interceptor.apply(payload.property, payload.classes)
            if classes is not None:
                payload = replace(payload, classes=classes)
        return payload

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ClassInterceptor]:
        return iter([wrapped for _, wrapped in self._entries])
