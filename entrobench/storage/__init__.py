from .artifacts import (
    payload_name,
    compressed_name,
    write_payload,
    write_compressed,
    read_payload,
    parse_payload_name,
    recalculate_entropy,
)

__all__ = [
    "payload_name", "compressed_name", "write_payload", "write_compressed",
    "read_payload", "parse_payload_name", "recalculate_entropy",
]
