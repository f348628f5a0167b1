from hyprdots.core.audio.abc import AudioSystem, Sink
from hyprdots.core.audio.real import RealAudioSystem

__all__ = [
    "AudioSystem",
    "RealAudioSystem",
    "Sink",
]
