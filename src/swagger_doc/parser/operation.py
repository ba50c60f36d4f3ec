"""Builds one Swagger operation from an annotated comment block."""

import logging

from swagger_doc.errors import MalformedAnnotationError, TypeNotFoundError
from swagger_doc.parser.base import (
    PRIMITIVE_TYPES,
    Operation,
    Response,
    Route,
    Schema,
    definition_ref,
)
from swagger_doc.parser.comments import (
    DEPRECATED,
    DESCRIPTION,
    REQUEST,
    RESPONSE,
    ROUTER,
    SUMMARY,
    first_annotation,
    get_annotations,
    has_tag,
    join_text,
)
from swagger_doc.parser.parameter import build_parameter

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE = "successful operation"


def parse_route(block: str) -> Route | None:
    """Route of the block's first `@Router` line, or None if it has no usable one."""
    tokens = first_annotation(block, ROUTER)
    if not tokens or len(tokens) < 2:
        return None
    return Route(method=tokens[0], path=tokens[1])


def build_operation(
    block: str,
    *,
    tag: str,
    operation_id: str,
    definitions: dict,
    security_definitions: dict | None = None,
    consumes: list[str] | None = None,
    produces: list[str] | None = None,
) -> tuple[Route, Operation] | None:
    """Build the operation described by a comment block.

    Returns None for blocks without a `@Router` annotation; those are
    not operations and contribute nothing to the document.

    Raises TypeNotFoundError when a body parameter or a response
    references a type that is neither primitive nor defined.
    """
    route = parse_route(block)
    if route is None:
        logger.debug("Skipping block without @%s in %s", ROUTER, operation_id)
        return None

    summary = first_annotation(block, SUMMARY)
    description = first_annotation(block, DESCRIPTION)

    parameters = [
        build_parameter(tokens, route, definitions)
        for tokens in get_annotations(block, REQUEST)
    ]

    responses = {"default": Response(description=DEFAULT_RESPONSE)}
    for tokens in get_annotations(block, RESPONSE):
        status, response = _build_response(tokens, route, definitions)
        responses[status] = response

    operation = Operation(
        tags=[tag],
        summary=join_text(summary) if summary is not None else "",
        description=join_text(description) if description is not None else "",
        operation_id=operation_id,
        consumes=consumes or [],
        produces=produces or [],
        parameters=parameters,
        security=_security(block, security_definitions or {}),
        responses=responses,
        deprecated=True if has_tag(block, DEPRECATED) else None,
    )
    return route, operation


def _security(block: str, security_definitions: dict) -> list[dict[str, list[str]]]:
    """One entry per configured scheme whose tag appears in the block, in config order."""
    security = []
    for name, scheme in security_definitions.items():
        if not has_tag(block, name):
            continue
        if scheme.get("type") == "oauth2":
            security.append({name: list(scheme.get("scopes") or {})})
        else:
            security.append({name: []})
    return security


def _build_response(tokens: list[str], route: Route, definitions: dict) -> tuple[str, Response]:
    if not tokens:
        raise MalformedAnnotationError(route.method, route.path, RESPONSE)

    status = tokens[0]
    type_name = tokens[1] if len(tokens) > 1 else ""
    if type_name in PRIMITIVE_TYPES:
        schema = Schema(type=type_name)
    elif type_name in definitions:
        schema = Schema(ref=definition_ref(type_name))
    else:
        raise TypeNotFoundError("response", route.method, route.path, type_name)

    return status, Response(schema_=schema, description=join_text(tokens[2:]))
