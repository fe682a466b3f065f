"""Office automation backends."""

import sys
from collections.abc import Callable

from pdfsweep.automation.base import AutomationHost
from pdfsweep.automation.com import ComHost, com_available
from pdfsweep.automation.models import OPEN_OPTIONS, OpenOptions
from pdfsweep.automation.soffice import SofficeHost
from pdfsweep.config.models import AutomationConfig
from pdfsweep.scanner.models import DocumentType

HostFactory = Callable[[DocumentType], AutomationHost]


def resolve_backend(config: AutomationConfig) -> str:
    """Pick a concrete backend name; ``auto`` prefers COM on Windows."""
    if config.backend != "auto":
        return config.backend
    if sys.platform == "win32" and com_available():
        return "com"
    return "soffice"


def create_host(doc_type: DocumentType, config: AutomationConfig) -> AutomationHost:
    """Create an (unstarted) automation host for one document type."""
    backend = resolve_backend(config)
    if backend == "com":
        return ComHost(doc_type)
    if backend == "soffice":
        return SofficeHost(doc_type, binary=config.soffice_path, timeout=config.timeout)
    raise ValueError(
        f"Unsupported automation backend: {backend!r}. Supported: com, soffice"
    )


__all__ = [
    "AutomationHost",
    "ComHost",
    "HostFactory",
    "OPEN_OPTIONS",
    "OpenOptions",
    "SofficeHost",
    "create_host",
    "resolve_backend",
]
