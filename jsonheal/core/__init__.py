"""
jsonheal Core Recovery Engine.

This module provides the scanner, the structured parse attempt and the
recoverer built on them.
"""

from .outcome import ParseOutcome, try_parse
from .recoverer import StructureRecoverer, loads, recover, recover_detailed
from .scanner import ScanState, balance, scan_structure

__all__ = [
    'recover', 'recover_detailed', 'loads', 'StructureRecoverer',
    'ParseOutcome', 'try_parse',
    'ScanState', 'scan_structure', 'balance',
]
