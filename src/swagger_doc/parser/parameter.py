"""Builds Swagger parameters from `@Request` annotations.

    @Request <in> <type> <name[*]> [description...]

A `*` anywhere in the name marks the parameter as required. Body
parameters reference a definition (`User`) or an array of a primitive
or definition (`array(string)`, `array(User)`); every other location
passes its type through unchecked.
"""

from swagger_doc.errors import MalformedAnnotationError, TypeNotFoundError
from swagger_doc.parser.comments import REQUEST, join_text
from swagger_doc.parser.base import PRIMITIVE_TYPES, Parameter, Route, Schema, definition_ref

ARRAY_PREFIX = "array("


def build_parameter(tokens: list[str], route: Route, definitions: dict) -> Parameter:
    """Build one parameter from the tokens of a `@Request` line."""
    if len(tokens) < 3:
        raise MalformedAnnotationError(route.method, route.path, REQUEST)

    location, type_token, name_token = tokens[0], tokens[1], tokens[2]
    location = location.lower()

    if location == "body":
        kwargs = {"schema_": _body_schema(type_token, route, definitions)}
    else:
        kwargs = {"type": type_token}

    return Parameter(
        location=location,
        name=name_token.replace("*", ""),
        required="*" in name_token,
        description=join_text(tokens[3:]),
        **kwargs,
    )


def _body_schema(type_token: str, route: Route, definitions: dict) -> Schema:
    if not type_token.startswith(ARRAY_PREFIX):
        return Schema(ref=_resolve(type_token, route, definitions))

    item_type = type_token[len(ARRAY_PREFIX):].removesuffix(")")
    if item_type in PRIMITIVE_TYPES:
        items = Schema(type=item_type)
    else:
        items = Schema(ref=_resolve(item_type, route, definitions))
    return Schema(type="array", items=items)


def _resolve(type_name: str, route: Route, definitions: dict) -> str:
    if type_name not in definitions:
        raise TypeNotFoundError("request", route.method, route.path, type_name)
    return definition_ref(type_name)
