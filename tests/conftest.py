import errno
import io

import pytest


class FailingStream(io.StringIO):
    """StringIO that raises once `fail_after` writes have succeeded."""

    def __init__(self, fail_after: int, exc: OSError):
        super().__init__()
        self.fail_after = fail_after
        self.exc = exc
        self.write_calls = 0

    def write(self, text):
        self.write_calls += 1
        if self.write_calls > self.fail_after:
            raise self.exc
        return super().write(text)


@pytest.fixture
def broken_pipe_stream():
    return FailingStream(fail_after=1, exc=BrokenPipeError(errno.EPIPE, "Broken pipe"))


@pytest.fixture
def io_error_stream():
    return FailingStream(fail_after=0, exc=OSError(errno.EIO, "Input/output error"))


@pytest.fixture
def record_line():
    return '{"ts":"T1","level":"info","logger":"L","msg":"hi","a":1}'


@pytest.fixture
def unicode_error_stream():
    return FailingStream(
        fail_after=0,
        exc=UnicodeEncodeError("ascii", "\ud800", 0, 1, "surrogates not allowed"),
    )
