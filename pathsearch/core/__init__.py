"""
Core search engine package.
Contains the adaptor contract, node records, open/closed sets and the search driver.
"""

from .adaptor import Adaptor, KeyedAdaptor, check_adaptor
from .record import Record, RecordArena
from .frontiers import OpenList, ClosedList
from .metrics import SearchStats, MeasuredRun
from .search import Search, SearchState, find_path
from .utils import reconstruct_path

__all__ = [
    'Adaptor', 'KeyedAdaptor', 'check_adaptor',
    'Record', 'RecordArena',
    'OpenList', 'ClosedList',
    'SearchStats', 'MeasuredRun',
    'Search', 'SearchState', 'find_path',
    'reconstruct_path',
]
