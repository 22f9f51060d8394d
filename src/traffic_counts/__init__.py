"""Traffic sensor counts: half-hour readings in, four summary reports out.

Library code lives in this package; the command-line entry point is
/scripts/report_counts.py.
"""

from .config import ReportConfig
from .collection import CountCollection
from .parsing import CountEntry, MalformedRecordError
