#!/usr/bin/env python3
"""
FASTA record stream for nucgrep.

Records are parsed lazily from an already opened text or binary stream,
one at a time, so memory use is bounded by the largest single record.
"""

from __future__ import annotations

from typing import IO, Iterable, Iterator, Union

from loguru import logger

from ..exceptions import MalformedInputError
from ..models import Record


HEADER_MARKER = ">"


class FastaReader:
    """Single-pass reader turning FASTA lines into Record objects."""
    
    def __init__(self, handle: Union[IO, Iterable], strict: bool = False, source: str = "<stream>"):
        """
        Initialize reader.
        
        Args:
            handle: Open text or binary stream (any iterable of lines)
            strict: Reject content before the first header instead of skipping it
            source: Name of the input, used in log messages
        """
        self.handle = handle
        self.strict = strict
        self.source = source
        self.line_number = 0
        self.skipped_lines = 0
        self.records_read = 0
        self._consumed = False
    
    def __iter__(self) -> Iterator[Record]:
        if self._consumed:
            raise RuntimeError(f"FASTA stream {self.source} has already been read")
        self._consumed = True
        return self._parse()
    
    def _parse(self) -> Iterator[Record]:
        header = None
        chunks = []
        
        for line in self.handle:
            self.line_number += 1
            if isinstance(line, bytes):
                line = line.decode("utf-8", errors="replace")
            
            if line.startswith(HEADER_MARKER):
                if header is not None:
                    yield self._emit(header, chunks)
                else:
                    self._report_skipped()
                header = line[1:].rstrip()
                chunks = []
                continue
            
            if header is None:
                self._leading_line(line)
                continue
            
            # drops blank lines, CR and any embedded whitespace
            chunks.append("".join(line.split()))
        
        if header is not None:
            yield self._emit(header, chunks)
        else:
            self._report_skipped()
    
    def _emit(self, header: str, chunks: list) -> Record:
        self.records_read += 1
        return Record(header=header, sequence="".join(chunks))
    
    def _leading_line(self, line: str) -> None:
        if not line.strip():
            return
        if self.strict:
            raise MalformedInputError(
                f"expected '{HEADER_MARKER}' at start of record",
                line_number=self.line_number,
                line_content=line.rstrip()
            )
        self.skipped_lines += 1
    
    def _report_skipped(self) -> None:
        if self.skipped_lines:
            logger.warning(
                f"Skipped {self.skipped_lines} line(s) before the first FASTA header in {self.source}"
            )


def read_fasta(handle: Union[IO, Iterable], strict: bool = False, source: str = "<stream>") -> Iterator[Record]:
    """Iterate over the records of an open FASTA stream."""
    return iter(FastaReader(handle, strict=strict, source=source))
