"""Data models for the generated Swagger 2.0 document.

Field names are Pythonic; aliases carry the Swagger key names
(`in`, `$ref`, `operationId`, ...) used when the document is dumped.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

SWAGGER_VERSION = "2.0"

PRIMITIVE_TYPES = ("boolean", "integer", "number", "string")


def definition_ref(name: str) -> str:
    return f"#/definitions/{name}"


class Schema(BaseModel):
    """A primitive type, a reference to a definition, or an array of either."""

    model_config = ConfigDict(populate_by_name=True)

    type: str | None = None
    ref: str | None = Field(default=None, alias="$ref")
    items: "Schema | None" = None


class Parameter(BaseModel):
    """A single operation parameter (path / query / header / body)."""

    model_config = ConfigDict(populate_by_name=True)

    location: str = Field(alias="in")
    name: str
    required: bool = False
    description: str = ""
    type: str | None = None  # non-body parameters only
    schema_: Schema | None = Field(default=None, alias="schema")  # body only

    @model_validator(mode="after")
    def _type_or_schema(self) -> "Parameter":
        if (self.type is None) == (self.schema_ is None):
            raise ValueError("exactly one of 'type' or 'schema' must be set")
        return self


class Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: Schema | None = Field(default=None, alias="schema")
    description: str = ""


class Operation(BaseModel):
    """One HTTP method on one path."""

    model_config = ConfigDict(populate_by_name=True)

    tags: list[str]
    summary: str = ""
    description: str = ""
    operation_id: str = Field(alias="operationId")
    consumes: list[str] = []
    produces: list[str] = []
    parameters: list[Parameter] = []
    security: list[dict[str, list[str]]] = []
    responses: dict[str, Response]
    deprecated: bool | None = None


class Route(BaseModel):
    """The `@Router` annotation of an operation block."""

    method: str  # as written, e.g. GET
    path: str  # verbatim, e.g. /pets/{id}


class TagGroup(BaseModel):
    name: str
    description: str = ""


class Document(BaseModel):
    """The assembled Swagger document. Fields cannot be reassigned; nested containers are not frozen."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    host: str = ""
    swagger: str = SWAGGER_VERSION
    base_path: str = Field(default="/", alias="basePath")
    info: dict = {}
    schemes: list[str] = []
    tags: list[TagGroup] = []
    paths: dict[str, dict[str, Operation]] = {}
    security_definitions: dict | None = Field(default=None, alias="securityDefinitions")
    definitions: dict = {}

    def to_dict(self) -> dict:
        """Plain dict with Swagger key names, ready for JSON/YAML dumping."""
        return self.model_dump(by_alias=True, exclude_none=True)
