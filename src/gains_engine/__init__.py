"""Character progression and workout generation for gamified strength training."""

__version__ = "0.1.0"
