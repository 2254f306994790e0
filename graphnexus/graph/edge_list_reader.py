"""
Reader for the textual edge-list format.

The first line holds the declared vertex count ``N``; every following line
is ``u v w``, whitespace separated, with ``w`` a non-negative integer.
"""

import logging
import re
from pathlib import Path
from typing import List, Tuple, Union

from ..core.constants import EDGE_LINE_TOKENS
from ..core.exceptions import (
    GraphIOError,
    InvalidWeightError,
    MalformedInputError,
)

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r'[+-]?\d+')
_WHITESPACE = re.compile(r'\s+')

EdgeRow = Tuple[str, str, int]


def parse_int(token: str, line_num: int, what: str) -> int:
    """Parse an integer token, raising MalformedInputError on failure."""
    if not _INTEGER.fullmatch(token):
        raise MalformedInputError(
            f"Line {line_num}: {what} '{token}' is not an integer",
            details={'line': line_num, 'token': token},
        )
    return int(token)


def parse_edge_line(line: str, line_num: int) -> EdgeRow:
    """
    Parse one ``u v w`` data line.
    
    Tokens are separated by runs of whitespace. Trailing whitespace is
    ignored, but leading whitespace yields an empty first token, so an
    indented line is rejected. A blank line has a single empty token.
    
    Args:
        line: Raw line text
        line_num: 1-based line number, used in error messages
        
    Returns:
        ``(u, v, w)`` tuple
        
    Raises:
        MalformedInputError: Wrong token count or unparsable weight
        InvalidWeightError: Negative weight
    """
    parts = _WHITESPACE.split(line.rstrip())
    if len(parts) != EDGE_LINE_TOKENS:
        raise MalformedInputError(
            f"Line {line_num}: expected {EDGE_LINE_TOKENS} tokens, got {len(parts)}",
            details={'line': line_num, 'tokens': parts},
        )
    u, v, raw_weight = parts
    weight = parse_int(raw_weight, line_num, 'weight')
    if weight < 0:
        raise InvalidWeightError(
            f"Line {line_num}: negative edge weight {weight} not allowed",
            details={'line': line_num, 'edge': (u, v), 'weight': weight},
        )
    return u, v, weight


class EdgeListReader:
    """
    Reads edge-list files into a declared vertex count and edge rows.
    """
    
    def __init__(self, encoding: str = 'utf-8', skip_blank_lines: bool = False):
        self.encoding = encoding
        self.skip_blank_lines = skip_blank_lines
    
    def read(self, path: Union[str, Path]) -> Tuple[int, List[EdgeRow]]:
        """
        Read and parse an edge-list file.
        
        Args:
            path: Path to the edge-list file
            
        Returns:
            Declared vertex count and the parsed ``(u, v, w)`` rows in file order
            
        Raises:
            GraphIOError: If the file cannot be opened or read
            MalformedInputError: If the header or a data line is malformed
            InvalidWeightError: If a weight is negative
        """
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise GraphIOError(f"Failed to read graph file {path}: {e}", details={'path': str(path)}) from e
        
        return self.parse_lines(lines)
    
    def parse_lines(self, lines: List[str]) -> Tuple[int, List[EdgeRow]]:
        """Parse already-read lines; see ``read``."""
        if not lines or not lines[0].strip():
            raise MalformedInputError("Missing declared vertex count on line 1", details={'line': 1})
        
        declared = parse_int(lines[0].strip(), 1, 'vertex count')
        rows: List[EdgeRow] = []
        
        for line_num, line in enumerate(lines[1:], start=2):
            if self.skip_blank_lines and not line.strip():
                continue
            rows.append(parse_edge_line(line, line_num))
        
        logger.debug(f"Parsed {len(rows)} edge lines, declared vertex count {declared}")
        return declared, rows
