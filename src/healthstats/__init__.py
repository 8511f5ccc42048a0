"""healthstats -- periodic exercise, sleep and mood statistics from raw health samples."""

__version__ = "0.1.0"
