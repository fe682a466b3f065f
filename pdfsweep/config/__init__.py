from .loader import CONFIG_ENV_VAR, load_config
from .models import AutomationConfig, PdfSweepConfig

__all__ = [
    "AutomationConfig",
    "CONFIG_ENV_VAR",
    "PdfSweepConfig",
    "load_config",
]
