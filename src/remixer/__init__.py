"""RE-MIXER: organize audio files by their embedded tags."""

__version__ = "0.1.0"
