"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import math


class ConvertUtils:
    UNITS = ["B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1 KB, 2.3 MB).
        Picks the largest unit keeping the value below 1024, rounds half-up to
        two decimals and drops the fraction when it is zero.
        """
        if size_bytes < 0:
            raise ValueError(f"Negative size not allowed: {size_bytes}")

        units = ConvertUtils.UNITS
        value = float(size_bytes)
        index = 0
        while value >= 1024 and index < len(units) - 1:
            value /= 1024
            index += 1

        rounded = math.floor(value * 100 + 0.5) / 100
        if rounded.is_integer():
            return f"{int(rounded)} {units[index]}"
        return f"{rounded} {units[index]}"

    @staticmethod
    def indent(depth: int, width: int) -> str:
        """Leading whitespace for an entry at the given tree depth."""
        if depth < 0:
            raise ValueError(f"Depth cannot be negative: {depth}")
        return " " * (width * depth)
