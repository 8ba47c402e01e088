"""In-memory codec and key formatting wrappers."""

from .main import i2pkeys


def i2p_b64encode(data: bytes):
    return i2pkeys.i2p_b64encode(data)


def i2p_b64decode(text: str):
    return i2pkeys.i2p_b64decode(text)


def looks_like_i2p_base64(text: str):
    return i2pkeys.looks_like_i2p_base64(text)


def clean_i2p_base64(text: str):
    return i2pkeys.clean_i2p_base64(text)


def is_correct_format(data):
    return i2pkeys.is_correct_format(data)


def format_key_data(data):
    return i2pkeys.format_key_data(data)


def format_keys_text(data):
    return i2pkeys.format_keys_text(data)


def split_keypair(data):
    return i2pkeys.split_keypair(data)


def b32_address(destination):
    return i2pkeys.b32_address(destination)


def describe_key(data):
    return i2pkeys.describe_key(data)


__all__ = [
    "b32_address",
    "clean_i2p_base64",
    "describe_key",
    "format_key_data",
    "format_keys_text",
    "i2p_b64decode",
    "i2p_b64encode",
    "is_correct_format",
    "looks_like_i2p_base64",
    "split_keypair",
]
