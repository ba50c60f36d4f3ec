"""Exceptions raised while building the Swagger document."""


class SwaggerDocError(Exception):
    """Base class for all swagger-doc errors."""


class ConfigError(SwaggerDocError):
    """Configuration file is missing or invalid."""


class TypeNotFoundError(SwaggerDocError):
    """A body parameter or response references an unknown type.

    kind is "request" or "response"; method is lower-cased.
    """

    def __init__(self, kind: str, method: str, path: str, type_name: str):
        self.kind = kind
        self.method = method.lower()
        self.path = path
        self.type_name = type_name
        super().__init__(
            f"error at {self.method}:{path}, the type '{type_name}' "
            f"of {kind} parameter does not exist"
        )


class MalformedAnnotationError(SwaggerDocError):
    """An annotation line is missing tokens it cannot do without."""

    def __init__(self, method: str, path: str, annotation: str):
        self.method = method.lower()
        self.path = path
        self.annotation = annotation
        super().__init__(f"error at {self.method}:{path}, malformed annotation '@{annotation}'")
