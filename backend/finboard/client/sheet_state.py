"""Open Sheet State — which row (if any) an edit sheet is showing."""

from dataclasses import dataclass


@dataclass
class OpenSheetState:
    id: str | None = None
    is_open: bool = False

    def on_open(self, row_id: str) -> None:
        self.id = row_id
        self.is_open = True

    def on_close(self) -> None:
        self.id = None
        self.is_open = False
