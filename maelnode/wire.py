from __future__ import annotations
from typing import Any, Mapping, Union

from .codecs import Codec, JSONCodec
from .errors import DecodeError
from .message import Envelope

_DEFAULT_CODEC = JSONCodec()


def encode_line(msg: Union[Envelope, Mapping[str, Any]], codec: Codec = _DEFAULT_CODEC) -> str:
    """Serialize one message to a single line (no trailing newline)."""
    if isinstance(msg, Envelope):
        env_dict = msg.to_dict()
    else:
        env_dict = {
            "src":  msg.get("src"),
            "dest": msg.get("dest"),
            "body": msg.get("body", {}),
        }
    return codec.dumps(env_dict)


def decode_line(line: Union[str, bytes], codec: Codec = _DEFAULT_CODEC) -> Envelope:
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise DecodeError(f"line is not UTF-8: {ex}") from ex

    try:
        env = codec.loads(line)
    except ValueError as ex:
        raise DecodeError(f"Failed to deserialize message: {ex}") from ex

    if not isinstance(env, dict):
        raise DecodeError(f"message must be a JSON object, got {type(env).__name__}")

    body = env.get("body")
    if not isinstance(body, dict):
        raise DecodeError("message body must be a JSON object")

    # src/dest may be absent on the handshake; consumers that need them check for ""
    src = env.get("src") or ""
    dest = env.get("dest") or ""
    if not isinstance(src, str) or not isinstance(dest, str):
        raise DecodeError("'src' and 'dest' must be strings")

    return Envelope(src=src, dest=dest, body=body)
