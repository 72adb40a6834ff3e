import pytest

from gdrivecore.pacing import (
    Calculator,
    DefaultCalculator,
    Pacer,
    State,
    default_invoker,
    new_google_drive,
)


def test_calculate_no_retries_is_zero():
    calc = DefaultCalculator(min_sleep=0.5, max_sleep=2.0, decay_constant=2)
    assert calc.calculate(State(sleep_time=1.0, consecutive_retries=0)) == 0


def test_calculate_first_retry_is_min_sleep():
    calc = DefaultCalculator(min_sleep=0.25, max_sleep=2.0, decay_constant=2)
    assert calc.calculate(State(sleep_time=1.0, consecutive_retries=1)) == 0.25


def test_calculate_zero_decay_keeps_sleep_time():
    calc = DefaultCalculator(min_sleep=0.1, max_sleep=5.0, decay_constant=0)
    assert calc.calculate(State(sleep_time=0.75, consecutive_retries=3)) == 0.75


def test_calculate_clamped_to_max_sleep():
    calc = DefaultCalculator(min_sleep=0.1, max_sleep=2.0, decay_constant=4)
    assert calc.calculate(State(sleep_time=1.0, consecutive_retries=5)) == 2.0


def test_calculate_clamped_to_min_sleep():
    calc = DefaultCalculator(min_sleep=0.3, max_sleep=2.0, decay_constant=1)
    assert calc.calculate(State(sleep_time=0.0, consecutive_retries=2)) == 0.3


def test_calculate_grows_without_max():
    calc = DefaultCalculator(min_sleep=0.1, max_sleep=0.0, decay_constant=1)
    state = State(sleep_time=0.5, consecutive_retries=2)
    assert calc.calculate(state) > state.sleep_time


def test_calculator_is_abstract():
    with pytest.raises(TypeError):
        Calculator()


def test_default_invoker_passes_result_through():
    err = ValueError("boom")
    assert default_invoker(0, 3, lambda: (True, err)) == (True, err)


def test_default_invoker_stops_at_limit():
    err = ValueError("boom")
    assert default_invoker(3, 3, lambda: (True, err)) == (False, err)


def test_call_succeeds_first_time():
    pacer = Pacer(retries=3)
    calls = []

    def paced():
        calls.append(1)
        return False, None

    assert pacer.call(paced) is None
    assert len(calls) == 1


def test_call_retries_until_limit_and_raises():
    pacer = Pacer(retries=2)
    calls = []
    err = RuntimeError("rate limited")

    def paced():
        calls.append(1)
        return True, err

    with pytest.raises(RuntimeError) as info:
        pacer.call(paced)
    assert info.value is err
    assert len(calls) == 3


def test_call_stops_when_no_longer_asked_again():
    pacer = Pacer(retries=5)
    results = iter([(True, RuntimeError("x")), (True, None), (False, None)])
    calls = []

    def paced():
        calls.append(1)
        return next(results)

    assert pacer.call(paced) is None
    assert len(calls) == 3


def test_call_raises_error_without_retry():
    pacer = Pacer(retries=5)
    calls = []

    def paced():
        calls.append(1)
        return False, KeyError("missing")

    with pytest.raises(KeyError):
        pacer.call(paced)
    assert len(calls) == 1


def test_call_resets_state():
    pacer = Pacer(retries=4)
    results = iter([(True, RuntimeError("x")), (False, None)])
    pacer.call(lambda: next(results))
    assert pacer.state.consecutive_retries == 0
    assert pacer.state.last_error is None


def test_custom_invoker_sees_retry_counts():
    seen = []

    def invoker(attempt, tries, paced):
        seen.append((attempt, tries))
        return default_invoker(attempt, tries, paced)

    pacer = Pacer(retries=2, invoker=invoker)
    with pytest.raises(RuntimeError):
        pacer.call(lambda: (True, RuntimeError("again")))
    assert seen == [(0, 2), (1, 2), (2, 2)]


def test_custom_calculator_is_consulted():
    states = []

    class Recording(Calculator):
        def calculate(self, state):
            states.append(state.consecutive_retries)
            return 0.0

    pacer = Pacer(retries=3, calculator=Recording())
    results = iter([(True, None), (True, None), (False, None)])
    assert pacer.call(lambda: next(results)) is None
    assert states == [1, 2]


def test_new_google_drive_defaults():
    pacer = new_google_drive()
    assert pacer.max_connections == 8
    assert pacer.retries == 10
    assert isinstance(pacer.calculator, DefaultCalculator)


def test_new_google_drive_accepts_options():
    calc = DefaultCalculator(min_sleep=0.01)
    pacer = new_google_drive(retries=1, calculator=calc)
    assert pacer.retries == 1
    assert pacer.calculator is calc