"""
Unit tests for the opt-in sink retry helpers.
"""

from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from itemflow.exceptions import SinkError
from itemflow.pipeline import CollectingSink, PipelineBuilder, RetryingSink, Sink, call_with_retry, retry_with_backoff


class FlakySink(Sink[Any]):
    """Sink that fails a fixed number of times before succeeding."""

    def __init__(self, name: str, failures: int, exc_type: type = ConnectionError) -> None:
        super().__init__(name)
        self.failures = failures
        self.exc_type = exc_type
        self.attempts = 0
        self.saved: List[Any] = []

    def save(self, item: Any) -> None:
        self.attempts += 1
        if self.attempts <= self.failures:
            raise self.exc_type(f"attempt {self.attempts} failed")
        self.saved.append(item)


@pytest.fixture
def sleep_mock(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("itemflow.pipeline.sinks.retry.time.sleep")


class TestCallWithRetry:
    def test_returns_on_first_success(self, sleep_mock: MagicMock) -> None:
        assert call_with_retry(lambda: "ok") == "ok"
        sleep_mock.assert_not_called()

    def test_retries_with_exponential_backoff(self, sleep_mock: MagicMock) -> None:
        sink = FlakySink("flaky", failures=2)
        call_with_retry(sink.save, "item", max_retries=3, initial_delay=1.0, backoff_factor=2.0)

        assert sink.saved == ["item"]
        assert sink.attempts == 3
        assert [call.args[0] for call in sleep_mock.call_args_list] == [1.0, 2.0]

    def test_delay_is_capped(self, sleep_mock: MagicMock) -> None:
        sink = FlakySink("flaky", failures=4)
        call_with_retry(sink.save, "item", max_retries=4, initial_delay=10.0, backoff_factor=3.0, max_delay=20.0)
        assert [call.args[0] for call in sleep_mock.call_args_list] == [10.0, 20.0, 20.0, 20.0]

    def test_raises_last_error_when_exhausted(self, sleep_mock: MagicMock) -> None:
        sink = FlakySink("flaky", failures=10)
        with pytest.raises(ConnectionError, match="attempt 3 failed"):
            call_with_retry(sink.save, "item", max_retries=2)
        assert sink.attempts == 3

    def test_non_retryable_errors_propagate_immediately(self, sleep_mock: MagicMock) -> None:
        sink = FlakySink("flaky", failures=1, exc_type=ValueError)
        with pytest.raises(ValueError):
            call_with_retry(sink.save, "item", retryable_exceptions=(ConnectionError,))
        assert sink.attempts == 1
        sleep_mock.assert_not_called()

    @pytest.mark.parametrize(
        "options",
        [{"max_retries": -1}, {"initial_delay": -0.5}, {"max_delay": -1.0}],
    )
    def test_rejects_negative_arguments(self, sleep_mock: MagicMock, options: Dict[str, Any]) -> None:
        sink = FlakySink("flaky", failures=0)
        with pytest.raises(ValueError, match="cannot be negative"):
            call_with_retry(sink.save, "item", **options)
        assert sink.attempts == 0


class TestRetryWithBackoff:
    def test_decorated_method(self, sleep_mock: MagicMock) -> None:
        class DecoratedSink(Sink[Any]):
            def __init__(self, name: str) -> None:
                super().__init__(name)
                self.attempts = 0

            @retry_with_backoff(max_retries=2, initial_delay=0.5)
            def save(self, item: Any) -> None:
                self.attempts += 1
                if self.attempts == 1:
                    raise ConnectionError("first call fails")

        sink = DecoratedSink("decorated")
        sink.save("item")

        assert sink.attempts == 2
        sleep_mock.assert_called_once_with(0.5)
        assert DecoratedSink.save.__name__ == "save"


class TestRetryingSink:
    def test_keeps_inner_name(self) -> None:
        inner = CollectingSink("memory")
        assert RetryingSink(inner).name == "memory"

    def test_rejects_invalid_arguments(self) -> None:
        with pytest.raises(ValueError):
            RetryingSink(CollectingSink(), max_retries=-1)
        with pytest.raises(ValueError):
            RetryingSink(CollectingSink(), initial_delay=-1.0)

    def test_recovers_inside_a_pipeline(self, sleep_mock: MagicMock) -> None:
        flaky = FlakySink("flaky", failures=1)
        summary = PipelineBuilder[int]().add_source([1, 2]).add_sink(RetryingSink(flaky, max_retries=1)).build().run()

        assert flaky.saved == [1, 2]
        assert summary.items_dispatched == 2
        assert sleep_mock.call_count == 1

    def test_exhausted_retries_fail_the_pipeline(self, sleep_mock: MagicMock) -> None:
        flaky = FlakySink("flaky", failures=10)
        pipeline = PipelineBuilder[int]().add_source([1, 2]).add_sink(RetryingSink(flaky, max_retries=2)).build()

        with pytest.raises(SinkError) as exc_info:
            pipeline.run()

        assert exc_info.value.sink.name == "flaky"
        assert isinstance(exc_info.value.cause, ConnectionError)
        assert flaky.attempts == 3
