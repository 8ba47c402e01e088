# I2PKEYS CONVERSION ENGINE ->

import os as _os_module
import warnings as _warnings_module


class DecodeError(ValueError):
    """Text is not valid I2P Base64."""


class InsufficientKeyLength(ValueError):
    """No candidate encoding is long enough to hold a destination."""


class KeyFileError(OSError):
    """A key file could not be read, written or given a directory."""

    def __init__(self, operation: str, path, cause: "BaseException | None" = None):
        self.operation = operation
        self.path = path
        self.cause = cause
        message = f"failed to {operation} {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class i2pkeys:
    import base64
    import binascii
    import pathlib
    import typing
    import sys
    try:
        import numpy as np
    except Exception:  # pragma: no cover - optional dependency
        np = None
    from cryptography.hazmat.primitives import hashes

    DecodeError = DecodeError
    InsufficientKeyLength = InsufficientKeyLength
    KeyFileError = KeyFileError

    class KeyPair(typing.NamedTuple):
        public_key: bytes
        private_key: bytes
        full_data: bytes

    @staticmethod
    def _env_int(name: str) -> "i2pkeys.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    # I2P swaps '+' and '/' for '-' and '~'
    I2P_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-~"
    I2P_ALTCHARS = b"-~"
    PAD = b"="
    # ASCII whitespace only; bytes such as 0x85 or 0xa0 are not trimmed
    WHITESPACE = " \t\n\r\v\f"
    _ACCEPTED_BYTES = I2P_ALPHABET + PAD
    _ACCEPTED_CHARS: typing.ClassVar[frozenset] = frozenset(_ACCEPTED_BYTES.decode("ascii"))
    # ASCII byte -> 6-bit value (255 = not in the alphabet)
    _I2P_DECODE_LUT: typing.ClassVar[bytes] = (lambda alphabet: bytes(
        alphabet.index(i) if i in alphabet else 255 for i in range(256)
    ))(I2P_ALPHABET)

    # Encoded length of a destination; only _split_destination reads it
    DESTINATION_B64_LENGTH = 516

    FAST_CODEC_THRESHOLD = 1024  # Use NumPy for data >= this size
    _FAST_CODEC_THRESHOLD_ENV = _env_int("I2PKEYS_FAST_THRESHOLD")
    if _FAST_CODEC_THRESHOLD_ENV is not None:
        FAST_CODEC_THRESHOLD = _FAST_CODEC_THRESHOLD_ENV

    PREVIEW_LENGTH = 40
    FORMATTED_SUFFIX = ".formatted"
    DIR_MODE = 0o755
    FILE_MODE = 0o600

    @staticmethod
    def _warn(message: str) -> None:
        _warnings_module.warn(message, RuntimeWarning, stacklevel=3)

    @staticmethod
    def _as_text(data: "i2pkeys.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        if isinstance(data, str):
            return data
        # latin-1 maps each byte to one code point and back
        return bytes(data).decode("latin-1")

    @staticmethod
    def _as_bytes(data: "i2pkeys.typing.Union[str, bytes, bytearray, memoryview]") -> bytes:
        if isinstance(data, str):
            return data.encode("utf-8")
        return bytes(data)

    # ------------------------------------------------------------------
    # Codec
    # ------------------------------------------------------------------

    @staticmethod
    def _fast_i2p_b64encode(data: bytes) -> bytes:
        """NumPy-accelerated I2P Base64 encoding."""
        np = i2pkeys.np
        arr = np.frombuffer(data, dtype=np.uint8)

        # Pad to multiple of 3 bytes
        pad_len = (3 - len(arr) % 3) % 3
        if pad_len:
            arr = np.concatenate([arr, np.zeros(pad_len, dtype=np.uint8)])

        # 3 bytes (24 bits) -> 4 x 6-bit values
        groups = arr.reshape(-1, 3)
        out = np.empty((len(groups), 4), dtype=np.uint8)
        out[:, 0] = groups[:, 0] >> 2
        out[:, 1] = ((groups[:, 0] & 0x03) << 4) | (groups[:, 1] >> 4)
        out[:, 2] = ((groups[:, 1] & 0x0F) << 2) | (groups[:, 2] >> 6)
        out[:, 3] = groups[:, 2] & 0x3F

        lut = np.frombuffer(i2pkeys.I2P_ALPHABET, dtype=np.uint8)
        result = lut[out.ravel()]
        if pad_len:
            result[-pad_len:] = ord("=")
        return result.tobytes()

    @staticmethod
    def _fast_i2p_b64decode(data: bytes) -> bytes:
        """NumPy-accelerated I2P Base64 decoding of already validated input."""
        np = i2pkeys.np

        stripped = data.rstrip(i2pkeys.PAD)
        pad_count = len(data) - len(stripped)

        lut = np.frombuffer(i2pkeys._I2P_DECODE_LUT, dtype=np.uint8)
        vals = lut[np.frombuffer(stripped, dtype=np.uint8)]
        if pad_count:
            vals = np.concatenate([vals, np.zeros(pad_count, dtype=np.uint8)])

        # 4 x 6-bit values -> 3 bytes
        groups = vals.reshape(-1, 4)
        out = np.empty((len(groups), 3), dtype=np.uint8)
        out[:, 0] = (groups[:, 0] << 2) | (groups[:, 1] >> 4)
        out[:, 1] = ((groups[:, 1] & 0x0F) << 4) | (groups[:, 2] >> 2)
        out[:, 2] = ((groups[:, 2] & 0x03) << 6) | groups[:, 3]

        result = out.ravel().tobytes()
        if pad_count:
            result = result[:-pad_count]
        return result

    @staticmethod
    def _validate_i2p_b64(raw: bytes) -> None:
        leftover = raw.translate(None, i2pkeys._ACCEPTED_BYTES)
        if leftover:
            offset = raw.index(leftover[:1])
            raise DecodeError(f"illegal I2P base64 data at input byte {offset}")
        if len(raw) % 4:
            raise DecodeError(f"I2P base64 length must be a multiple of 4, got {len(raw)}")
        stripped = raw.rstrip(i2pkeys.PAD)
        if len(raw) - len(stripped) > 2:
            raise DecodeError("too much I2P base64 padding")
        misplaced = stripped.find(i2pkeys.PAD)
        if misplaced != -1:
            raise DecodeError(f"I2P base64 padding before end of input at byte {misplaced}")

    @classmethod
    def i2p_b64encode(cls, data: "i2pkeys.typing.Union[bytes, bytearray, memoryview]") -> str:
        raw = bytes(data)
        if cls.np is not None and len(raw) >= cls.FAST_CODEC_THRESHOLD:
            encoded = cls._fast_i2p_b64encode(raw)
        else:
            encoded = cls.base64.b64encode(raw, altchars=cls.I2P_ALTCHARS)
        return encoded.decode("ascii")

    @classmethod
    def i2p_b64decode(cls, text: "i2pkeys.typing.Union[str, bytes, bytearray, memoryview]") -> bytes:
        if isinstance(text, str):
            try:
                raw = text.encode("ascii")
            except UnicodeEncodeError as exc:
                raise DecodeError(f"illegal I2P base64 data at input byte {exc.start}") from None
        else:
            raw = bytes(text)
        if not raw:
            return b""
        cls._validate_i2p_b64(raw)
        if cls.np is not None and len(raw) >= cls.FAST_CODEC_THRESHOLD:
            return cls._fast_i2p_b64decode(raw)
        try:
            return cls.base64.b64decode(raw, altchars=cls.I2P_ALTCHARS, validate=True)
        except cls.binascii.Error as exc:
            raise DecodeError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Detection
    # ------------------------------------------------------------------

    @classmethod
    def looks_like_i2p_base64(cls, text: "i2pkeys.typing.Union[str, bytes]") -> bool:
        text = cls._as_text(text).strip(cls.WHITESPACE)
        if not text:
            return False
        if any(ch not in cls._ACCEPTED_CHARS for ch in text):
            return False
        try:
            cls.i2p_b64decode(text)
        except DecodeError:
            return False
        return True

    @classmethod
    def is_correct_format(cls, data: "i2pkeys.typing.Union[str, bytes]") -> bool:
        lines = cls._as_text(data).strip(cls.WHITESPACE).split("\n")
        if len(lines) != 2:
            return False
        return cls.looks_like_i2p_base64(lines[0]) and cls.looks_like_i2p_base64(lines[1])

    @classmethod
    def clean_i2p_base64(cls, text: "i2pkeys.typing.Union[str, bytes]") -> str:
        text = cls._as_text(text).strip(cls.WHITESPACE)
        return "".join(ch for ch in text if ch in cls._ACCEPTED_CHARS or ch == "\n")

    # ------------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------------

    @classmethod
    def _split_destination(cls, complete_key: str) -> "i2pkeys.typing.Optional[str]":
        if len(complete_key) < cls.DESTINATION_B64_LENGTH:
            return None
        return complete_key[:cls.DESTINATION_B64_LENGTH] + "\n" + complete_key

    @classmethod
    def format_key_data(cls, data: "i2pkeys.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        text = cls._as_text(data)
        if cls.is_correct_format(text):
            return text

        if cls.looks_like_i2p_base64(text):
            complete_key = text.strip(cls.WHITESPACE).split("\n")[0]
            formatted = cls._split_destination(complete_key)
            if formatted is not None:
                return formatted
            cls._warn(
                f"Encoded key is only {len(complete_key)} characters; "
                "re-encoding the raw input bytes instead"
            )

        complete_key = cls.i2p_b64encode(cls._as_bytes(data))
        formatted = cls._split_destination(complete_key)
        if formatted is None:
            raise InsufficientKeyLength(
                f"key data too short to extract public key portion "
                f"({len(complete_key)} < {cls.DESTINATION_B64_LENGTH} characters)"
            )
        return formatted

    @classmethod
    def format_keys_text(cls, data: "i2pkeys.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        text = cls._as_text(data)
        if cls.is_correct_format(text):
            return text

        complete_key = ""
        for line in cls.clean_i2p_base64(text).split("\n"):
            if line.strip(cls.WHITESPACE):
                complete_key = line
                break

        formatted = cls._split_destination(complete_key)
        if formatted is None:
            raise InsufficientKeyLength(
                f"key data too short to format correctly "
                f"({len(complete_key)} < {cls.DESTINATION_B64_LENGTH} characters)"
            )
        return formatted

    @classmethod
    def split_keypair(cls, data: "i2pkeys.typing.Union[str, bytes]") -> "i2pkeys.KeyPair":
        text = cls._as_text(data)
        if not cls.is_correct_format(text):
            raise ValueError("Key data is not in the two-line format")
        lines = text.strip(cls.WHITESPACE).split("\n")
        destination, complete_key = (line.strip(cls.WHITESPACE) for line in lines)
        public_key = cls.i2p_b64decode(destination)
        full_data = cls.i2p_b64decode(complete_key)
        return cls.KeyPair(public_key, full_data[len(public_key):], full_data)

    @classmethod
    def b32_address(cls, destination: "i2pkeys.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        raw = cls.i2p_b64decode(destination.strip(cls.WHITESPACE)) if isinstance(destination, str) else bytes(destination)
        digest = cls.hashes.Hash(cls.hashes.SHA256())
        digest.update(raw)
        encoded = cls.base64.b32encode(digest.finalize()).decode("ascii")
        return encoded.lower().rstrip("=") + ".b32.i2p"

    @staticmethod
    def _truncate(text: str, max_len: int) -> str:
        if len(text) <= max_len:
            return text
        return text[:max_len] + "..."

    @classmethod
    def describe_key(cls, data: "i2pkeys.typing.Union[str, bytes]") -> "dict[str, i2pkeys.typing.Any]":
        text = cls._as_text(data)
        if not cls.is_correct_format(text):
            raise ValueError("Key data is not in the two-line format")
        lines = text.strip(cls.WHITESPACE).split("\n")
        destination, complete_key = (line.strip(cls.WHITESPACE) for line in lines)
        return {
            "destination_preview": cls._truncate(destination, cls.PREVIEW_LENGTH),
            "destination_length": len(destination),
            "full_key_length": len(complete_key),
            "full_key_preview": cls._truncate(complete_key, cls.PREVIEW_LENGTH),
            "b32_address": cls.b32_address(destination),
        }

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize_path(path_like: "i2pkeys.typing.Union[str, i2pkeys.pathlib.Path]") -> "i2pkeys.pathlib.Path":
        if isinstance(path_like, i2pkeys.pathlib.Path):
            path = path_like
        else:
            path = i2pkeys.pathlib.Path(str(path_like))
        return path.expanduser()

    @staticmethod
    def _ensure_existing_file(path: "i2pkeys.pathlib.Path") -> None:
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

    @staticmethod
    def _read_key_file(path: "i2pkeys.pathlib.Path") -> bytes:
        i2pkeys._ensure_existing_file(path)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise KeyFileError("read", path, exc) from exc

    @staticmethod
    def _write_key_file(path: "i2pkeys.pathlib.Path", payload: bytes) -> None:
        try:
            path.parent.mkdir(mode=i2pkeys.DIR_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise KeyFileError("mkdir", path.parent, exc) from exc
        if path.is_file():
            # open() only applies the mode to files it creates
            try:
                _os_module.chmod(path, i2pkeys.FILE_MODE)
            except OSError as exc:
                raise KeyFileError("chmod", path, exc) from exc
        flags = _os_module.O_WRONLY | _os_module.O_CREAT | _os_module.O_TRUNC | getattr(_os_module, "O_BINARY", 0)
        try:
            fd = _os_module.open(path, flags, i2pkeys.FILE_MODE)
            with _os_module.fdopen(fd, "wb") as handle:
                handle.write(payload)
        except OSError as exc:
            raise KeyFileError("write", path, exc) from exc

    @staticmethod
    def default_output_path(input_path: "i2pkeys.typing.Union[str, i2pkeys.pathlib.Path]") -> "i2pkeys.pathlib.Path":
        path = i2pkeys._normalize_path(input_path)
        return path.with_name(path.name + i2pkeys.FORMATTED_SUFFIX)

    @classmethod
    def convert_key_file(cls, input_path, output_path=None) -> "i2pkeys.pathlib.Path":
        src = cls._normalize_path(input_path)
        dst = cls._normalize_path(output_path) if output_path else cls.default_output_path(src)
        data = cls._read_key_file(src)
        formatted = cls.format_key_data(data)
        cls._write_key_file(dst, cls._as_bytes(formatted))
        return dst

    @classmethod
    def format_keys_file(cls, input_path, output_path=None) -> "i2pkeys.pathlib.Path":
        src = cls._normalize_path(input_path)
        dst = cls._normalize_path(output_path) if output_path else cls.default_output_path(src)
        data = cls._read_key_file(src)
        if cls.is_correct_format(data) and src.absolute() == dst.absolute():
            return dst
        formatted = cls.format_keys_text(data)
        cls._write_key_file(dst, cls._as_bytes(formatted))
        return dst

    @classmethod
    def check_key_file(cls, path) -> bool:
        return cls.is_correct_format(cls._read_key_file(cls._normalize_path(path)))


def cli(argv=None) -> int:
    import argparse

    def _cli_config_path() -> "i2pkeys.pathlib.Path":
        cfg = _os_module.getenv("I2PKEYS_CLI_CONFIG")
        if cfg:
            return i2pkeys.pathlib.Path(cfg).expanduser()
        xdg = _os_module.getenv("XDG_CONFIG_HOME")
        if xdg:
            return i2pkeys.pathlib.Path(xdg) / "i2pkeys" / "cli.conf"
        appdata = _os_module.getenv("APPDATA")
        if appdata:
            return i2pkeys.pathlib.Path(appdata) / "i2pkeys" / "cli.conf"
        return i2pkeys.pathlib.Path("~/.config/i2pkeys/cli.conf").expanduser()

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("I2PKEYS_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("I2PKEYS_CLI_STYLE") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        if style in {"color", "emoji", "on"}:
            return False
        cfg_path = _cli_config_path()
        try:
            if cfg_path.exists():
                data = cfg_path.read_text(encoding="utf-8").lower()
                if "plain=1" in data or "plain=true" in data:
                    return True
                if "style=plain" in data or "mode=plain" in data:
                    return True
        except OSError:
            pass
        return False

    class _CliTheme:
        def __init__(self, plain: bool):
            self.plain = plain
            self.reset = "" if plain else "\033[0m"
            self.bold = "" if plain else "\033[1m"
            self.red = "" if plain else "\033[31m"
            self.green = "" if plain else "\033[32m"
            self.yellow = "" if plain else "\033[33m"
            self.cyan = "" if plain else "\033[36m"

        def _wrap(self, msg: str, color: str, emoji: str | None = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def warn(self, msg: str) -> str:
            return self._wrap(msg, self.yellow, "⚠️")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

        def info(self, msg: str) -> str:
            return self._wrap(msg, self.cyan, "✨")

    theme = _CliTheme(_cli_plain_mode())

    def _print_key_info(text: str) -> None:
        details = i2pkeys.describe_key(text)
        print()
        print(theme.info("Key Information:"))
        print(f"- Destination (public key): {details['destination_preview']}")
        print(f"- Destination length: {details['destination_length']} characters")
        print(f"- Full key length: {details['full_key_length']} characters")
        print(f"- Full key preview: {details['full_key_preview']}")
        print(f"- B32 address: {details['b32_address']}")
        print()
        print("Format: Two lines")
        print("- Line 1: Base64-encoded destination (public key)")
        print("- Line 2: Base64-encoded full keypair (public + private)")

    def _run_conversion(convert, args) -> int:
        print(f"Formatting I2P key file: {args.input}")
        output = args.output or i2pkeys.default_output_path(args.input)
        print(f"Output file: {output}")
        try:
            with _warnings_module.catch_warnings(record=True) as caught:
                _warnings_module.simplefilter("always", RuntimeWarning)
                out_path = convert(args.input, output)
        except Exception as exc:
            print(theme.err(f"Error: {exc}"))
            return 1
        for warning in caught:
            print(theme.warn(str(warning.message)), file=i2pkeys.sys.stderr)

        try:
            result = out_path.read_bytes()
        except OSError as exc:
            print(theme.err(f"Error reading result file: {exc}"))
            return 1
        if not i2pkeys.is_correct_format(result):
            print(theme.warn("Warning: Output file is not in the correct format"))
            return 1
        print(theme.ok("Conversion successful - key is now in the correct format"))
        if args.verbose:
            _print_key_info(i2pkeys._as_text(result))
        return 0

    parser = argparse.ArgumentParser(
        prog="i2pkeys",
        description="I2P Keys Converter - format I2P keys for I2P client libraries",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser(
        "convert",
        help="Convert a binary or single-line key file to the two-line format"
    )
    convert.add_argument("input", help="Path to the I2P key file")
    convert.add_argument("-o", "--output", default=None, help="Output path (default: INPUT.formatted)")
    convert.add_argument("-v", "--verbose", action="store_true", help="Print key details after converting")

    clean = subparsers.add_parser(
        "clean",
        help="Strip stray characters from an encoded key file and format it"
    )
    clean.add_argument("input", help="Path to the I2P key file")
    clean.add_argument("-o", "--output", default=None, help="Output path (default: INPUT.formatted)")
    clean.add_argument("-v", "--verbose", action="store_true", help="Print key details after formatting")

    check = subparsers.add_parser(
        "check",
        help="Check whether a key file is already in the two-line format"
    )
    check.add_argument("input", help="Path to the I2P key file")

    info = subparsers.add_parser(
        "info",
        help="Show destination, key lengths and b32 address of a two-line key file"
    )
    info.add_argument("input", help="Path to a two-line I2P key file")

    args = parser.parse_args(argv)

    if args.command == "check":
        try:
            correct = i2pkeys.check_key_file(args.input)
        except Exception as exc:
            print(theme.err(f"Error: {exc}"))
            return 1
        if correct:
            print(theme.ok("File IS in the correct two-line format"))
            return 0
        print(theme.warn("File is NOT in the correct two-line format"))
        return 1

    if args.command == "info":
        try:
            data = i2pkeys._read_key_file(i2pkeys._normalize_path(args.input))
            _print_key_info(i2pkeys._as_text(data))
            return 0
        except Exception as exc:
            print(theme.err(f"Error: {exc}"))
            return 1

    if args.command == "convert":
        return _run_conversion(i2pkeys.convert_key_file, args)

    if args.command == "clean":
        return _run_conversion(i2pkeys.format_keys_file, args)

    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
