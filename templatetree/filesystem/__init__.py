"""File systems a template tree can be read from."""

from .base import FileSystem
from .memoryfs import MemoryFileSystem, ResourceFileSystem
from .osfs import OSFileSystem

__all__ = ["FileSystem", "MemoryFileSystem", "OSFileSystem", "ResourceFileSystem"]
