"""
Unit tests for the background music track
"""

import numpy as np
import pytest

from beat_pong.audio.track import MusicTrack
from beat_pong.audio.track import to_unit_range


@pytest.fixture
def missing_track(tmp_path) -> MusicTrack:
    return MusicTrack(tmp_path / "missing.ogg")


class TestMissingTrack:
    """A track that cannot be loaded stays off"""

    def test_load_fails(self, missing_track: MusicTrack) -> None:
        assert missing_track.load() is False
        assert not missing_track.loaded

    def test_play_fails(self, missing_track: MusicTrack) -> None:
        assert missing_track.play() is False
        assert missing_track.playing is False

    def test_toggle_fails(self, missing_track: MusicTrack) -> None:
        assert missing_track.toggle() is False
        assert missing_track.playing is False

    def test_pause_is_noop(self, missing_track: MusicTrack) -> None:
        missing_track.pause()
        assert missing_track.playing is False

    def test_position_is_zero(self, missing_track: MusicTrack) -> None:
        assert missing_track.position() == 0.0

    @pytest.mark.parametrize("volume,expected", [(0.7, 0.7), (1.5, 1.0), (-0.2, 0.0)])
    def test_volume_is_clamped(self, missing_track: MusicTrack, volume, expected) -> None:
        missing_track.set_volume(volume)
        assert missing_track.volume == pytest.approx(expected)


class TestSampleScaling:
    """Test mixer samples are scaled according to their format"""

    def test_signed_16_bit(self) -> None:
        raw = np.array([-32768, 0, 16384], dtype=np.int16)
        np.testing.assert_allclose(to_unit_range(raw, -16), [-1.0, 0.0, 0.5])

    def test_unsigned_8_bit(self) -> None:
        raw = np.array([0, 128, 192], dtype=np.uint8)
        np.testing.assert_allclose(to_unit_range(raw, 8), [-1.0, 0.0, 0.5])

    def test_signed_8_bit(self) -> None:
        raw = np.array([-128, 64], dtype=np.int8)
        np.testing.assert_allclose(to_unit_range(raw, -8), [-1.0, 0.5])

    def test_float_is_unchanged(self) -> None:
        raw = np.array([-0.25, 0.75], dtype=np.float32)
        np.testing.assert_allclose(to_unit_range(raw, 32), [-0.25, 0.75])

    def test_stereo_shape_is_kept(self) -> None:
        raw = np.array([[-32768, 32767], [0, 0]], dtype=np.int16)
        assert to_unit_range(raw, -16).shape == (2, 2)
