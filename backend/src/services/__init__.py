"""Service layer: configuration and read-only access to the file library."""

from .config import AppConfig, get_config, reload_config
from .library import LibraryService, build_combined_tree, get_all_records, resolve_file
from .paths import SUPPORTED_EXTENSIONS, ancestor_chain, is_supported_file, strip_extension
from .titles import derive_title, title_from_text
from .walker import build_tree, list_records, read_record, walk

__all__ = [
    "AppConfig",
    "get_config",
    "reload_config",
    "LibraryService",
    "build_combined_tree",
    "get_all_records",
    "resolve_file",
    "SUPPORTED_EXTENSIONS",
    "ancestor_chain",
    "is_supported_file",
    "strip_extension",
    "derive_title",
    "title_from_text",
    "build_tree",
    "list_records",
    "read_record",
    "walk",
]
