from pydantic import BaseModel, Field
from typing import Literal


class AutomationConfig(BaseModel):
    backend: Literal["auto", "com", "soffice"] = "auto"
    soffice_path: str | None = None
    timeout: int | None = Field(default=None, gt=0)


class PdfSweepConfig(BaseModel):
    automation: AutomationConfig = Field(default_factory=AutomationConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
