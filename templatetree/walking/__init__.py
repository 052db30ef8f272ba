from .filters import file_extension, matches_extension
from .walker import walk_entries

__all__ = ["file_extension", "matches_extension", "walk_entries"]
