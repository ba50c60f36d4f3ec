import pytest

from swagger_doc.errors import MalformedAnnotationError, TypeNotFoundError
from swagger_doc.parser.base import PRIMITIVE_TYPES, Route
from swagger_doc.parser.parameter import build_parameter

ROUTE = Route(method="POST", path="/pets")
DEFINITIONS = {"pet": {"type": "object"}}


class TestNonBodyParameter:
    def test_query_param(self):
        p = build_parameter(["query", "integer", "limit", "Max", "results"], ROUTE, DEFINITIONS)
        assert p.location == "query"
        assert p.type == "integer"
        assert p.schema_ is None
        assert p.name == "limit"
        assert p.required is False
        assert p.description == "Max results "

    def test_type_passes_through_unchecked(self):
        p = build_parameter(["formData", "file", "upload*"], ROUTE, DEFINITIONS)
        assert p.type == "file"
        assert p.required is True
        assert p.description == ""

    def test_location_case_insensitive(self):
        p = build_parameter(["PATH", "string", "id*"], ROUTE, DEFINITIONS)
        assert p.location == "path"


class TestBodyParameter:
    def test_reference_required(self):
        p = build_parameter(["body", "pet", "pet*", "Pet", "to", "add"], ROUTE, DEFINITIONS)
        data = p.model_dump(by_alias=True, exclude_none=True)
        assert data == {
            "in": "body",
            "name": "pet",
            "required": True,
            "description": "Pet to add ",
            "schema": {"$ref": "#/definitions/pet"},
        }

    @pytest.mark.parametrize("primitive", PRIMITIVE_TYPES)
    def test_array_of_primitive(self, primitive):
        p = build_parameter(["body", f"array({primitive})", "items"], ROUTE, DEFINITIONS)
        assert p.schema_.model_dump(by_alias=True, exclude_none=True) == {
            "type": "array",
            "items": {"type": primitive},
        }

    def test_array_of_definition(self):
        p = build_parameter(["Body", "array(pet)", "pets"], ROUTE, DEFINITIONS)
        assert p.schema_.type == "array"
        assert p.schema_.items.ref == "#/definitions/pet"

    def test_unknown_reference(self):
        with pytest.raises(TypeNotFoundError) as exc_info:
            build_parameter(["body", "dog", "dog"], ROUTE, DEFINITIONS)
        err = exc_info.value
        assert err.kind == "request"
        assert err.method == "post"
        assert err.path == "/pets"
        assert err.type_name == "dog"
        assert "post:/pets" in str(err)

    def test_unknown_array_item(self):
        with pytest.raises(TypeNotFoundError) as exc_info:
            build_parameter(["body", "array(dog)", "dogs"], ROUTE, DEFINITIONS)
        assert exc_info.value.type_name == "dog"

    def test_too_few_tokens(self):
        with pytest.raises(MalformedAnnotationError):
            build_parameter(["query", "string"], ROUTE, DEFINITIONS)
