"""Pytest configuration and fixtures."""
# std imports
import io

# 3rd party
import pytest


try:
    from pytest_codspeed import BenchmarkFixture  # noqa: F401
except ImportError:
    # Provide a no-op benchmark fixture when pytest-codspeed is not installed
    @pytest.fixture
    def benchmark():
        """No-op benchmark fixture for environments without pytest-codspeed."""
        def _passthrough(func, *args, **kwargs):
            return func(*args, **kwargs)
        return _passthrough


class FailingSink(io.BytesIO):
    """BytesIO that raises OSError once ``fail`` is set."""

    fail = False

    def write(self, data):
        if self.fail:
            raise OSError(28, 'No space left on device')
        return super().write(data)

    def flush(self):
        if self.fail:
            raise OSError(28, 'No space left on device')
        super().flush()


@pytest.fixture
def failing_sink():
    """A binary sink that can be switched to fail every write and flush."""
    return FailingSink()
