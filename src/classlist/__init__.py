"""classlist: resolve, merge and intercept CSS class declarations."""

__version__ = "0.1.0"

from classlist.classes import create_classes, generate_class_list  # noqa: E402
from classlist.compose import compose_classes, section_classes  # noqa: E402
from classlist.config import DEFAULT_CONFIG, ClassListConfig  # noqa: E402
from classlist.errors import ClassListError, ResolverDepthError  # noqa: E402
from classlist.hooks import (  # noqa: E402
    ClassHook,
    ClassInterceptor,
    ClassPayload,
    FunctionInterceptor,
    exclude_interceptor,
    logging_interceptor,
    section_interceptor,
)
from classlist.model import (  # noqa: E402
    ClassMap,
    ClassNode,
    ClassSource,
    LiteralSource,
    NodeHooks,
    Resolver,
    as_source,
)

__all__ = [
    "__version__",
    # core
    "create_classes",
    "generate_class_list",
    "compose_classes",
    "section_classes",
    # config
    "ClassListConfig",
    "DEFAULT_CONFIG",
    # errors
    "ClassListError",
    "ResolverDepthError",
    # hooks
    "ClassHook",
    "ClassInterceptor",
    "ClassPayload",
    "FunctionInterceptor",
    "logging_interceptor",
    "exclude_interceptor",
    "section_interceptor",
    # model
    "ClassSource",
    "LiteralSource",
    "ClassMap",
    "Resolver",
    "as_source",
    "ClassNode",
    "NodeHooks",
]
