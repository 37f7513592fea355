"""tabtuning — tablature tuning resolution and course placement."""

__version__ = "0.1.0"
