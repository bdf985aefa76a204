"""Save action adapter delegating to the document itself."""

from __future__ import annotations


class DocumentSaveAction:
    def save(self, doc) -> None:
        doc.save()
