"""cycle-tracker — local menstrual cycle log with simple predictions.

Records period start/end dates in a SQLite file and derives the average
cycle length, the next expected start date, and a fertile window estimate.
"""

from cycle_tracker.version import __version__

__all__: list[str] = ["__version__"]
