from scrape_ops.integrations.time.abc import Time
from scrape_ops.integrations.time.fake import FakeTime
from scrape_ops.integrations.time.real import RealTime

__all__ = [
    "FakeTime",
    "RealTime",
    "Time",
]
