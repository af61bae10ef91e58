"""Tests for the simulated audio output."""

import pytest

from airwaves.radio.audio import AudioChannel, SimulatedAudioOutput


class TestSimulatedAudioOutput:
  """Tests for SimulatedAudioOutput."""

  def test_initial_state(self) -> None:
    """Test that a fresh output is silent with full volumes."""
    audio = SimulatedAudioOutput()
    assert not audio.is_playing()
    assert audio.volumes == {channel: 1.0 for channel in AudioChannel}
    assert audio.events == []

  def test_play_and_stop(self) -> None:
    """Test main channel playback control."""
    audio = SimulatedAudioOutput()
    audio.play("clip/01")
    assert audio.is_playing()
    assert audio.current == "clip/01"

    audio.stop()
    assert not audio.is_playing()
    assert [e.action for e in audio.events] == ["play", "stop"]

  def test_clip_finishes_after_duration(self) -> None:
    """Test that advancing past the clip length ends playback."""
    audio = SimulatedAudioOutput(clip_seconds=30.0)
    audio.play("clip/01")
    audio.advance(29.0)
    assert audio.is_playing()
    audio.advance(1.0)
    assert not audio.is_playing()

  def test_play_restarts_position(self) -> None:
    """Test that a new clip starts from the beginning."""
    audio = SimulatedAudioOutput(clip_seconds=30.0)
    audio.play("clip/01")
    audio.advance(20.0)
    audio.play("clip/02")
    audio.advance(20.0)
    assert audio.current == "clip/02"

  def test_advance_while_silent(self) -> None:
    """Test that advancing with nothing playing is harmless."""
    audio = SimulatedAudioOutput()
    audio.advance(500.0)
    assert not audio.is_playing()
    assert audio.position == 0.0

  def test_one_shot_does_not_touch_main(self) -> None:
    """Test that cues go to the effects channel."""
    audio = SimulatedAudioOutput()
    audio.play("clip/01")
    audio.play_one_shot("fx/tuning")
    assert audio.current == "clip/01"
    assert audio.events[-1].channel is AudioChannel.EFFECTS
    assert audio.played() == ["clip/01"]

  def test_loop_and_volume(self) -> None:
    """Test looping beds and per-channel volume."""
    audio = SimulatedAudioOutput()
    audio.loop(AudioChannel.STATIC, "static/hiss")
    audio.set_volume(AudioChannel.STATIC, 0.25)
    assert audio.loops[AudioChannel.STATIC] == "static/hiss"
    assert audio.volumes[AudioChannel.STATIC] == 0.25
    assert audio.volumes[AudioChannel.MAIN] == 1.0

  @pytest.mark.parametrize("clip_seconds", [0.0, -5.0])
  def test_invalid_clip_length(self, clip_seconds) -> None:
    """Test that clips must have a positive length."""
    with pytest.raises(ValueError, match="clip_seconds"):
      SimulatedAudioOutput(clip_seconds=clip_seconds)
