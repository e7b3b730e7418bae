"""FitPet: workout tracking with a virtual pet that reflects your consistency."""

__version__ = "0.1.0"
