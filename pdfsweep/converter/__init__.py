"""Document-to-PDF conversion over office automation hosts."""

from pdfsweep.converter.converter import TypeConverter, host_session
from pdfsweep.converter.runner import ConversionRunner, RunSummary, run

__all__ = [
    "ConversionRunner",
    "RunSummary",
    "TypeConverter",
    "host_session",
    "run",
]
