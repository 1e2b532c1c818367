import pytest

from mosaic.result import Result, ResultError, err, ok


def multiply_by_two(v):
    return ok(v * 2)


def fail_with_message(msg):
    return err("Error: " + msg)


def test_ok_and_err_states():
    ok_res = ok(123)
    assert ok_res.is_ok()
    assert not ok_res.is_err()
    assert ok_res.unwrap() == 123

    err_res = err("failure")
    assert err_res.is_err()
    assert not err_res.is_ok()
    assert err_res.error() == "failure"


def test_unwrap_raises_on_err():
    with pytest.raises(ResultError):
        err("oops").unwrap()


def test_error_raises_on_ok():
    with pytest.raises(ResultError):
        ok(10).error()


def test_result_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        err("x").unwrap()


def test_and_then_chains_on_ok():
    result = ok(5).and_then(multiply_by_two)
    assert result.is_ok()
    assert result.unwrap() == 10


def test_and_then_short_circuits_on_err():
    chained = err("bad").and_then(multiply_by_two)
    assert chained.is_err()
    assert chained.error() == "bad"


def test_or_else_chains_on_err():
    recovered = err("problem").or_else(fail_with_message)
    assert recovered.is_err()
    assert recovered.error() == "Error: problem"


def test_or_else_passes_through_on_ok():
    result = ok(7).or_else(fail_with_message)
    assert result.is_ok()
    assert result.unwrap() == 7


def test_ok_function_creates_ok():
    res = ok("hello")
    assert res.is_ok()
    assert res.unwrap() == "hello"


def test_err_function_creates_err():
    res = err(42)
    assert res.is_err()
    assert res.error() == 42


def test_ok_holds_same_object():
    value = [55]
    res = ok(value)
    res.unwrap()[0] = 99
    assert value == [99]


def test_multiple_and_then_chaining():
    result = (
        ok(2)
        .and_then(multiply_by_two)
        .and_then(multiply_by_two)
        .and_then(lambda v: ok(v + 1))
    )
    assert result.is_ok()
    assert result.unwrap() == 9


def test_short_circuit_on_first_err():
    result = err("fail1").and_then(multiply_by_two).and_then(lambda v: err("fail2"))
    assert result.is_err()
    assert result.error() == "fail1"


def test_multiple_or_else_chaining():
    result = err("e1").or_else(lambda e: err(e + ":e2")).or_else(lambda e: ok(0))
    assert result.is_ok()
    assert result.unwrap() == 0


def test_or_else_pass_thru_on_ok_first():
    result = ok(3).or_else(lambda e: err("ignored")).and_then(multiply_by_two)
    assert result.is_ok()
    assert result.unwrap() == 6


def test_and_then_then_or_else():
    result = ok(5).and_then(lambda v: err(f"err:{v}")).or_else(lambda e: ok(-1))
    assert result.is_ok()
    assert result.unwrap() == -1


def test_chained_function_must_return_result():
    with pytest.raises(TypeError):
        ok(1).and_then(lambda v: v + 1)


def test_equality():
    assert ok(1) == ok(1)
    assert ok(1) != err(1)
    assert isinstance(ok(1), Result)