from bobassistant.domain import MessageKind, SensorState, SensorVariant
from bobassistant.parsing import DecodeResult, PayloadDecodeError, PayloadDecoder, decode_payload
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "DecodeResult",
    "decode_payload",
    "MessageKind",
    "PayloadDecodeError",
    "PayloadDecoder",
    "SensorState",
    "SensorVariant",
]

try:
    __version__ = version("bobassistant")
except PackageNotFoundError:
    __version__ = "0.0.0"
