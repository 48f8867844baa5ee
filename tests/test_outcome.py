"""Success / Failure contract."""

import pytest

from outcomes import Absent, Failure, Present, Success, UnwrapError

pytestmark = pytest.mark.unit


def _never(*_args):
    raise AssertionError("callback must not be called")


def parse_int(raw: str):
    return Success(int(raw)) if raw.isdigit() else Failure(f"not a number: {raw}")


def test_variant_predicates():
    assert Success(1).is_success() is True
    assert Success(1).is_failure() is False
    assert Failure("e").is_failure() is True
    assert Failure("e").is_success() is False


def test_unwrap():
    assert Success("v").unwrap() == "v"
    with pytest.raises(UnwrapError, match="Failure") as exc_info:
        Failure("boom").unwrap()
    assert exc_info.value.variant == "Failure"
    assert exc_info.value.payload == "boom"


def test_unwrap_chains_exception_errors():
    cause = ValueError("bad input")
    with pytest.raises(UnwrapError) as exc_info:
        Failure(cause).unwrap()
    assert exc_info.value.__cause__ is cause
    assert exc_info.value.payload is cause


def test_error_payload_need_not_be_an_exception():
    error = {"code": 404}
    assert Failure(error).unwrap_err() is error
    assert Failure(error).map_err(lambda e: e["code"]) == Failure(404)


def test_and():
    failure = Failure("first")
    assert Success(1).and_(Success(2)) == Success(2)
    assert Success(1).and_(Failure("second")) == Failure("second")
    assert failure.and_(Success(2)) is failure
    assert failure.and_(Failure("second")) is failure


def test_and_then():
    assert Success("12").and_then(parse_int) == parse_int("12")
    assert Success("x").and_then(parse_int) == Failure("not a number: x")

    failure = Failure("upstream")
    assert failure.and_then(_never) is failure


def test_or():
    success = Success(1)
    assert success.or_(Success(2)) is success
    assert Failure("e").or_(Success(2)) == Success(2)
    assert Failure("e").or_(Failure("f")) == Failure("f")


def test_or_else_receives_error():
    success = Success(1)
    assert success.or_else(_never) is success
    assert Failure("e").or_else(lambda e: Success(len(e))) == Success(1)
    assert Failure("e").or_else(lambda e: Failure(e.upper())) == Failure("E")


def test_map():
    failure = Failure("e")
    assert Success(2).map(lambda n: n * 3) == Success(6)
    assert failure.map(_never) is failure


def test_map_err():
    success = Success(2)
    assert success.map_err(_never) is success
    assert Failure("e").map_err(str.upper) == Failure("E")


def test_map_or():
    assert Success(2).map_or(0, lambda n: n + 1) == 3
    assert Failure("e").map_or(0, _never) == 0


def test_map_or_else():
    assert Success(2).map_or_else(_never, lambda n: n + 1) == 3
    assert Failure("e").map_or_else(len, _never) == 1


def test_to_optional():
    assert Success(3).to_optional() == Present(3)
    assert Success(3).to_optional().unwrap() == 3
    assert Failure("e").to_optional().is_absent()


def test_error_to_optional():
    assert Failure("e").error_to_optional() == Present("e")
    assert Success(3).error_to_optional() == Absent()


def test_unwrap_or():
    assert Success(1).unwrap_or(0) == 1
    assert Failure("e").unwrap_or(0) == 0


def test_unwrap_or_else():
    assert Success(1).unwrap_or_else(_never) == 1
    assert Failure("abc").unwrap_or_else(len) == 3


def test_unwrap_err_on_success_raises():
    with pytest.raises(UnwrapError, match="Success") as exc_info:
        Success(1).unwrap_err()
    assert exc_info.value.payload == 1


def test_expect():
    assert Success(1).expect("needs a value") == 1
    with pytest.raises(UnwrapError, match="needs a value"):
        Failure("e").expect("needs a value")


def test_tap_and_tap_err():
    values, errors = [], []
    Success(1).tap(values.append).tap_err(errors.append)
    Failure("e").tap(values.append).tap_err(errors.append)
    assert values == [1]
    assert errors == ["e"]


def test_equality_and_hashing():
    assert Success(1) == Success(1)
    assert Success(1) != Failure(1)
    assert Failure("e") == Failure("e")
    assert len({Success(1), Success(1), Failure(1)}) == 2


def test_pattern_matching():
    def describe(outcome):
        match outcome:
            case Success(value):
                return f"ok {value}"
            case Failure(error):
                return f"failed {error}"

    assert describe(Success(1)) == "ok 1"
    assert describe(Failure("x")) == "failed x"


def test_chained_pipeline():
    outcome = (
        Success(" 41 ")
        .map(str.strip)
        .and_then(parse_int)
        .map(lambda n: n + 1)
        .map_err(lambda e: f"parse: {e}")
    )
    assert outcome == Success(42)

    outcome = Success("forty").and_then(parse_int).map(_never).map_err(lambda e: f"parse: {e}")
    assert outcome == Failure("parse: not a number: forty")


def test_repr():
    assert repr(Success(1)) == "Success(1)"
    assert repr(Failure("e")) == "Failure('e')"


def test_construction_through_subscripted_alias():
    assert Success[int](1) == Success(1)
    assert Failure[str]("e") == Failure("e")
