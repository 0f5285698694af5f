from dataclasses import dataclass
from types import SimpleNamespace

from pydantic import BaseModel

from safe_errors.errors.models import NormalizedError
from safe_errors.errors.normalizer import to_normalized_error


@dataclass
class _Point:
    x: int
    y: int


class _Payload(BaseModel):
    code: str
    retry: bool = False


class _Opaque:
    __slots__ = ()


class TestErrorLikeValues:
    def test_exception_is_wrapped_directly(self) -> None:
        source = ValueError("bad input")
        err = to_normalized_error(source)
        assert isinstance(err, NormalizedError)
        assert err.message == "bad input"
        assert err.original_value is source

    def test_error_like_dict_keeps_its_fields(self) -> None:
        source = {"message": "remote", "stack": "at remote()"}
        err = to_normalized_error(source)
        assert err.message == "remote"
        assert err.stack == "at remote()"
        assert err.original_value is source


class TestPrimitiveValues:
    def test_string(self) -> None:
        err = to_normalized_error("boom")
        assert err.message == "Unexpected value thrown: boom"
        assert err.original_value == "boom"

    def test_number(self) -> None:
        assert to_normalized_error(42).message == "Unexpected value thrown: 42"

    def test_boolean(self) -> None:
        assert to_normalized_error(False).message == "Unexpected value thrown: False"

    def test_none(self) -> None:
        err = to_normalized_error(None)
        assert err.message == "Unexpected value thrown: None"
        assert err.original_value is None

    def test_stack_is_never_empty(self) -> None:
        err = to_normalized_error(7)
        assert err.stack == err.message


class TestCompositeValues:
    def test_dict_is_serialized(self) -> None:
        value = {"code": 1, "tags": ["a"]}
        err = to_normalized_error(value)
        assert err.message == 'Unexpected value thrown: {"code":1,"tags":["a"]}'
        assert err.original_value is value

    def test_list_is_serialized(self) -> None:
        assert to_normalized_error([1, 2]).message == "Unexpected value thrown: [1,2]"

    def test_dataclass_is_serialized(self) -> None:
        err = to_normalized_error(_Point(1, 2))
        assert err.message == 'Unexpected value thrown: {"x":1,"y":2}'

    def test_pydantic_model_is_serialized(self) -> None:
        err = to_normalized_error(_Payload(code="E1"))
        assert err.message == 'Unexpected value thrown: {"code":"E1","retry":false}'

    def test_plain_object_is_serialized(self) -> None:
        err = to_normalized_error(SimpleNamespace(status="down"))
        assert err.message == 'Unexpected value thrown: {"status":"down"}'

    def test_dict_missing_stack_is_not_error_like(self) -> None:
        err = to_normalized_error({"message": "only"})
        assert err.message == 'Unexpected value thrown: {"message":"only"}'


class TestUnserializableValues:
    def test_circular_reference(self) -> None:
        value: dict[str, object] = {}
        value["self"] = value
        err = to_normalized_error(value)
        assert err.message == "Unexpected value thrown: non-stringifiable object"
        assert err.original_value is value

    def test_object_without_dict(self) -> None:
        value = _Opaque()
        err = to_normalized_error(value)
        assert err.message == "Unexpected value thrown: non-stringifiable object"
        assert err.original_value is value


class TestEmptyExceptions:
    def test_stack_is_never_empty(self) -> None:
        err = to_normalized_error(ValueError())
        assert err.stack == "ValueError"
