import pytest

from session_request import Signal, SignalAlreadyDispatchedError
from tests.fakes import Recorder


class TestSignal:
    def test_dispatch_calls_listeners_in_order(self):
        signal = Signal("response_received")
        order: list[str] = []
        signal.add(lambda value: order.append(f"first:{value}"))
        signal.add(lambda value: order.append(f"second:{value}"))

        signal.dispatch("ok")

        assert order == ["first:ok", "second:ok"]
        assert signal.dispatched
        assert signal.dispatch_count == 1

    def test_dispatch_at_most_once(self):
        signal = Signal("error_received")
        listener = Recorder()
        signal.add(listener)
        signal.dispatch("boom")

        with pytest.raises(SignalAlreadyDispatchedError):
            signal.dispatch("boom")
        assert listener.call_count == 1

    def test_removed_listener_not_called(self):
        signal = Signal("response_received")
        listener = Recorder()
        signal.add(listener)
        signal.remove(listener)

        signal.dispatch()

        assert listener.call_count == 0

    def test_add_rejects_non_callable(self):
        with pytest.raises(TypeError):
            Signal("response_received").add("not callable")  # type: ignore[arg-type]
