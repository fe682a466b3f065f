"""pdfsweep — batch-convert office documents under a folder to PDF."""

__version__ = "0.1.0"
