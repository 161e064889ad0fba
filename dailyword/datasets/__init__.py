from .catalog import WordCatalog, DATA_DIR, default_paths
from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words, write_lines

__all__ = ["WordCatalog", "DATA_DIR", "default_paths", "validate_wordlists", "pretty_summary",
           "read_lines", "read_words", "write_lines"]
