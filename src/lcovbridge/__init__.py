"""lcovbridge - convert LCOV and JaCoCo coverage reports into one model.

Parsed reports can be summarized for the console or written back out as
LCOV tracefiles for genhtml and friends.
"""

__version__ = "0.1.0"
