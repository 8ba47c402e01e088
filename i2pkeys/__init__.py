"""
I2PKEYS - I2P key file converter

Turns raw binary key files or single encoded key blobs into the two-line
layout (destination, then full keypair) that I2P client libraries load.
"""

from .main import DecodeError, InsufficientKeyLength, KeyFileError, cli, i2pkeys, main
from .api_strings import (
    b32_address,
    clean_i2p_base64,
    describe_key,
    format_key_data,
    format_keys_text,
    i2p_b64decode,
    i2p_b64encode,
    is_correct_format,
    looks_like_i2p_base64,
    split_keypair,
)
from .api_files import check_key_file, convert_key_file, default_output_path, format_keys_file
from .version import __version__

KeyPair = i2pkeys.KeyPair
DESTINATION_B64_LENGTH = i2pkeys.DESTINATION_B64_LENGTH

__all__ = [
    "DESTINATION_B64_LENGTH",
    "DecodeError",
    "InsufficientKeyLength",
    "KeyFileError",
    "KeyPair",
    "__version__",
    "b32_address",
    "check_key_file",
    "clean_i2p_base64",
    "cli",
    "convert_key_file",
    "default_output_path",
    "describe_key",
    "format_key_data",
    "format_keys_file",
    "format_keys_text",
    "i2p_b64decode",
    "i2p_b64encode",
    "i2pkeys",
    "is_correct_format",
    "looks_like_i2p_base64",
    "main",
    "split_keypair",
]
