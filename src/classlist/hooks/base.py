"""Base protocol for class interceptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol


class ClassInterceptor(Protocol):
    """A class-map-to-class-map rewrite step for one composition key.

    Returning ``None`` leaves the map unchanged.
    """

    def apply(
        self, property: str, classes: dict[str, bool]
    ) -> Optional[dict[str, bool]]: ...


InterceptorFunc = Callable[[str, dict[str, bool]], Optional[dict[str, bool]]]


@dataclass(frozen=True)
class FunctionInterceptor:
    """Adapts a plain ``(property, classes) -> classes`` function."""

    func: InterceptorFunc

    def apply(
        self, property: str, classes: dict[str, bool]
    ) -> Optional[dict[str, bool]]:
        return self.func(property, classes)


def as_interceptor(interceptor: ClassInterceptor | InterceptorFunc) -> ClassInterceptor:
    """Return *interceptor* itself, or wrap it if it is a plain function."""
    if hasattr(interceptor, "apply"):
        return interceptor  # type: ignore[return-value]
    return FunctionInterceptor(interceptor)  # type: ignore[arg-type]
