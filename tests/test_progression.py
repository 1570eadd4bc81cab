"""Tests for ProgressionTrack."""

from elfarena.models.progression import ProgressionTrack
from elfarena.settings.game_config import LevelCurve


class TestProgressionTrack:
    """Test suite for ProgressionTrack."""

    def test_initial_threshold(self):
        """threshold = floor(100 * level * 1.5)."""
        track = ProgressionTrack()
        assert track.level == 1
        assert track.experience == 0
        assert track.exp_to_next_level == 150

    def test_gain_below_threshold(self):
        track = ProgressionTrack()
        assert track.gain_experience(149) is False
        assert track.level == 1
        assert track.experience == 149
        assert track.remaining == 1

    def test_exact_threshold_levels_once(self):
        track = ProgressionTrack()
        assert track.gain_experience(track.exp_to_next_level) is True
        assert track.level == 2
        assert track.experience == 0
        assert track.exp_to_next_level == 300

    def test_large_gain_levels_repeatedly(self):
        """Surplus carries across several thresholds in one call."""
        track = ProgressionTrack()
        assert track.gain_experience(150 + 300 + 10) is True
        assert track.level == 3
        assert track.experience == 10
        assert track.exp_to_next_level == 450

    def test_double_threshold_carries_over(self):
        """2 * threshold + 1 at level 1 crosses one threshold; the next is larger."""
        track = ProgressionTrack()
        track.gain_experience(2 * 150 + 1)
        assert track.level == 2
        assert track.experience == 151
        assert track.experience < track.exp_to_next_level

    def test_experience_below_threshold_after_gain(self):
        track = ProgressionTrack()
        for amount in [0, 37, 150, 999, 1, 4000]:
            track.gain_experience(amount)
            assert track.experience < track.exp_to_next_level

    def test_injected_curve(self):
        track = ProgressionTrack(curve=LevelCurve(base_exp=10, multiplier=1.0))
        assert track.exp_to_next_level == 10
        assert track.gain_experience(10 + 20) is True
        assert track.level == 3
        assert track.experience == 0

    def test_str(self):
        track = ProgressionTrack()
        track.gain_experience(20)
        assert str(track) == "20/150"
