"""File-oriented convenience wrappers."""

from .main import i2pkeys


def convert_key_file(input_path: str, output_path: str | None = None):
    return i2pkeys.convert_key_file(input_path, output_path)


def format_keys_file(input_path: str, output_path: str | None = None):
    return i2pkeys.format_keys_file(input_path, output_path)


def check_key_file(path: str):
    return i2pkeys.check_key_file(path)


def default_output_path(input_path: str):
    return i2pkeys.default_output_path(input_path)


__all__ = [
    "check_key_file",
    "convert_key_file",
    "default_output_path",
    "format_keys_file",
]
