"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size strings for -i / -a and byte counts for the statistics summary.
"""
import re

# Whole number, optional binary multiplier, optional trailing B: 4096, 500K, 32M, 1gb
SIZE_PATTERN = re.compile(r"^(\d+)\s*([KMGT]?)B?$", re.IGNORECASE)

MULTIPLIERS = {
    "": 1,
    "K": 1024,
    "M": 1024 ** 2,
    "G": 1024 ** 3,
    "T": 1024 ** 4,
}


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """Render a byte count with two decimals in the largest fitting unit (1536 -> 1.50KB)."""
        if size_bytes < 0:
            return "0B"

        value = float(size_bytes)
        for unit in ("B", "KB", "MB", "GB"):
            if value < 1024:
                return f"{value:.2f}{unit}"
            value /= 1024
        return f"{value:.2f}TB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Parse a size such as '4096', '500K', '32M' or '1GB' into bytes.
        Multipliers are binary (1K == 1024). Only whole numbers are accepted.
        Raises ValueError for anything else, including negative values.
        """
        text = size_str.strip()
        if not text:
            raise ValueError("Empty size value")
        if text.startswith("-"):
            raise ValueError(f"Negative size not allowed: '{text}'")

        match = SIZE_PATTERN.match(text)
        if match is None:
            raise ValueError(
                f"Invalid size format: '{text}'. Expected a whole number with an "
                f"optional K, M, G or T suffix (e.g. 4096, 500K, 32M)"
            )

        digits, suffix = match.groups()
        return int(digits) * MULTIPLIERS[suffix.upper()]
