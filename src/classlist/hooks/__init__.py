from classlist.hooks.base import (
    ClassInterceptor,
    FunctionInterceptor,
    InterceptorFunc,
    as_interceptor,
)
from classlist.hooks.builtin import (
    exclude_interceptor,
    logging_interceptor,
    section_interceptor,
)
from classlist.hooks.dispatcher import ClassHook, ClassPayload

__all__ = [
    "ClassInterceptor",
    "FunctionInterceptor",
    "InterceptorFunc",
    "as_interceptor",
    "ClassHook",
    "ClassPayload",
    "logging_interceptor",
    "exclude_interceptor",
    "section_interceptor",
]
