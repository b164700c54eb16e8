from .categories import classify, category_icon
from .line_parser import FileRecord, parse_line, parse_listing

__all__ = ["FileRecord", "parse_listing", "parse_line", "classify", "category_icon"]
