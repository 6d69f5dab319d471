from songlist.utils.parsing import parse_float_or_default, parse_int_or_default
from songlist.utils.table import render_table
from songlist.utils.logging import setup_logging

__all__ = ["parse_float_or_default", "parse_int_or_default", "render_table", "setup_logging"]
