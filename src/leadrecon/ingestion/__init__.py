from .reader import decode_bytes, is_tab_delimited, is_utf16, parse_records, read_dataset

__all__ = [
    "decode_bytes",
    "is_tab_delimited",
    "is_utf16",
    "parse_records",
    "read_dataset",
]
