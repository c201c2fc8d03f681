"""Safe counterparts of exception-throwing operations, one module per domain.

- collection: try_get_value, try_get_at, try_first, try_last
- files: try_read_text, try_read_bytes, try_write_text, try_write_bytes
- serialization: try_serialize, try_serialize_bytes, try_deserialize, JsonOptions
- parsing: try_parse_int/long/double/decimal/bool/datetime/uuid
- http: try_get/post/put/patch/delete, try_get_string/bytes, try_*_json (async)
"""

from .collection import try_first, try_get_at, try_get_value, try_last
from .files import try_read_bytes, try_read_text, try_write_bytes, try_write_text
from .http import (
    try_delete,
    try_get,
    try_get_bytes,
    try_get_json,
    try_get_string,
    try_patch,
    try_patch_json,
    try_post,
    try_post_json,
    try_put,
    try_put_json,
    try_send,
)
from .parsing import (
    try_parse_bool,
    try_parse_datetime,
    try_parse_decimal,
    try_parse_double,
    try_parse_guid,
    try_parse_int,
    try_parse_long,
    try_parse_uuid,
)
from .serialization import JsonOptions, try_deserialize, try_serialize, try_serialize_bytes

__all__ = [
    # Collection
    "try_get_value", "try_get_at", "try_first", "try_last",
    # File
    "try_read_text", "try_read_bytes", "try_write_text", "try_write_bytes",
    # JSON
    "JsonOptions", "try_serialize", "try_serialize_bytes", "try_deserialize",
    # Parse
    "try_parse_int", "try_parse_long", "try_parse_double", "try_parse_decimal",
    "try_parse_bool", "try_parse_datetime", "try_parse_uuid", "try_parse_guid",
    # HTTP
    "try_send", "try_get", "try_post", "try_put", "try_patch", "try_delete",
    "try_get_string", "try_get_bytes",
    "try_get_json", "try_post_json", "try_put_json", "try_patch_json",
]
