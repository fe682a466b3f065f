"""Per-type options for opening documents in an automation host."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pdfsweep.scanner.models import DocumentType


class OpenOptions(BaseModel):
    """How a host should open a document before exporting it."""

    model_config = ConfigDict(frozen=True)

    read_only: bool = False
    untitled: bool = False
    with_window: bool = True
    auto_hyphenation: bool = False
    fit_to_single_page: bool = False  # spreadsheets: one page wide and tall per sheet


OPEN_OPTIONS: dict[DocumentType, OpenOptions] = {
    DocumentType.WORD: OpenOptions(auto_hyphenation=True),
    DocumentType.PRESENTATION: OpenOptions(
        read_only=True, untitled=True, with_window=False
    ),
    DocumentType.SPREADSHEET: OpenOptions(fit_to_single_page=True),
}
