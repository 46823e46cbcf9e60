"""
Stream Tests
============

Tests for TokenReader and the exposure stream set.
"""

import io

import pytest

from exposure_stacker.errors import ExposureDataError, ExposureOpenError
from exposure_stacker.models import ErrorKind, Pixel
from exposure_stacker.stream import (
    EXPOSURE_COUNT,
    ExposureStream,
    ExposureStreamSet,
    StreamState,
    TokenReader,
)


class TestTokenReader:
    """Token splitting, integer parsing and rewind."""

    def test_tokens_ignore_line_layout(self):
        reader = TokenReader(io.StringIO("P3\n2 1\n255\n1 2\n3   4 5 6\n"))
        tokens = [reader.next_token() for _ in range(10)]
        assert tokens == ["P3", "2", "1", "255", "1", "2", "3", "4", "5", "6"]
        assert reader.tokens_read == 10

    def test_end_of_stream(self):
        reader = TokenReader(io.StringIO("1 2\n\n"))
        assert reader.next_int() == 1
        assert reader.next_int() == 2
        with pytest.raises(EOFError):
            reader.next_token()

    def test_non_integer(self):
        reader = TokenReader(io.StringIO("12 abc"))
        assert reader.next_int() == 12
        with pytest.raises(ValueError):
            reader.next_int()

    @pytest.mark.parametrize("token", ["1_0", "2_5", "\u0663", "\uff15", "0x10", "1.0", "+", "--1"])
    def test_rejects_non_decimal_integer(self, token):
        reader = TokenReader(io.StringIO(f"7 {token} 8"))
        assert reader.next_int() == 7
        with pytest.raises(ValueError):
            reader.next_int()

    def test_signed_integers(self):
        reader = TokenReader(io.StringIO("+4 -3 007"))
        assert [reader.next_int() for _ in range(3)] == [4, -3, 7]

    def test_rewind(self):
        reader = TokenReader(io.StringIO("a b\nc\n"))
        reader.next_token()
        reader.next_token()
        reader.rewind()
        assert reader.tokens_read == 0
        assert reader.next_token() == "a"


class TestExposureStream:
    """Single exposure stream lifecycle."""

    def test_open_read_close(self, tmp_path, pixmap_writer):
        path = pixmap_writer(tmp_path / "a.ppm", 1, 1, [(10, 20, 30)])
        stream = ExposureStream(0, path)
        assert stream.state == StreamState.PENDING

        assert stream.open()
        assert stream.state == StreamState.OPEN
        for _ in range(4):
            stream.reader.next_token()
        assert stream.read_pixel() == Pixel(10, 20, 30)

        stream.close()
        assert stream.state == StreamState.CLOSED
        assert not stream.is_open

    def test_open_missing_file(self, tmp_path):
        stream = ExposureStream(3, tmp_path / "missing.ppm")
        assert not stream.open()
        assert stream.state == StreamState.FAILED
        with pytest.raises(ExposureOpenError):
            stream.rewind()

    def test_close_unopened_is_noop(self, tmp_path):
        stream = ExposureStream(0, tmp_path / "never.ppm")
        stream.close()
        assert stream.state == StreamState.CLOSED

    def test_exhausted_stream(self, tmp_path):
        path = tmp_path / "short.ppm"
        path.write_text("1 2\n")
        stream = ExposureStream(5, path)
        stream.open()
        with pytest.raises(ExposureDataError) as exc_info:
            stream.read_pixel()
        assert exc_info.value.stream_index == 5
        assert exc_info.value.kind == ErrorKind.DATA
        assert stream.state == StreamState.EXHAUSTED
        stream.close()

    def test_channel_out_of_range(self, tmp_path):
        path = tmp_path / "bright.ppm"
        path.write_text("300 0 0\n")
        stream = ExposureStream(0, path)
        stream.open()
        with pytest.raises(ExposureDataError):
            stream.read_pixel()
        assert stream.state == StreamState.BAD_DATA
        stream.close()

    def test_malformed_token_is_bad_data(self, tmp_path):
        path = tmp_path / "junk.ppm"
        path.write_text("1 2_5 3\n4 5 6\n")
        stream = ExposureStream(1, path)
        stream.open()
        with pytest.raises(ExposureDataError):
            stream.read_channels()
        assert stream.state == StreamState.BAD_DATA
        stream.close()

    def test_read_channels_returns_ints(self, tmp_path):
        path = tmp_path / "ok.ppm"
        path.write_text("0 128\n255\n")
        stream = ExposureStream(0, path)
        stream.open()
        assert stream.read_channels() == (0, 128, 255)
        stream.close()


class TestExposureStreamSet:
    """Fixed-size ordered set and close-on-exit behaviour."""

    def test_requires_exposure_count(self, tmp_path):
        with pytest.raises(ValueError):
            ExposureStreamSet([tmp_path / "a.ppm"] * (EXPOSURE_COUNT - 1))

    def test_order_is_stable(self, tmp_path):
        paths = [tmp_path / f"{i}.ppm" for i in range(EXPOSURE_COUNT)]
        streams = ExposureStreamSet(paths)
        assert [stream.index for stream in streams] == list(range(EXPOSURE_COUNT))
        assert streams[3].path == paths[3]
        assert len(streams) == EXPOSURE_COUNT

    def test_partial_open_fails_and_closes_all(self, make_exposures, uniform_exposures):
        paths = make_exposures("partial", 1, 1, uniform_exposures(1, 1, (0, 0, 0)))
        paths[7].unlink()

        with pytest.raises(ExposureOpenError) as exc_info:
            with ExposureStreamSet(paths) as streams:
                try:
                    streams.open_all()
                finally:
                    states = streams.states()
        assert exc_info.value.kind == ErrorKind.OPEN
        assert states[7] == StreamState.FAILED
        assert states.count(StreamState.OPEN) == EXPOSURE_COUNT - 1
        assert streams.states() == [StreamState.CLOSED] * EXPOSURE_COUNT
