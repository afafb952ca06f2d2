from .ignore_list import load_ignore_list, read_ignore_list
from .line_source import iter_lines

__all__ = ['iter_lines', 'load_ignore_list', 'read_ignore_list']
