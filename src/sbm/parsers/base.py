# src/sbm/parsers/base.py

from abc import ABC, abstractmethod

from sbm.document.models import Document


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> Document:
        """
        Parse a bookmark file and return its document.

        Requirements:
        - Single forward pass over the lines
        - Deterministic output for same input
        - Raises a ParseError subclass on the first bad line; never
          returns a partial document
        """
        raise NotImplementedError
