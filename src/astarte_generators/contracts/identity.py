"""Device id encoding.

Astarte device ids are 128-bit values exchanged as URL-safe base64
without padding, which is always 22 characters long.
"""

from __future__ import annotations

import base64
import binascii

from astarte_generators.contracts.errors import InvalidDeviceIdError

DEVICE_ID_BYTES = 16
ENCODED_DEVICE_ID_LENGTH = 22


def encode_device_id(device_id: bytes) -> str:
    """Encode a raw 16-byte device id.

    Args:
        device_id: Raw device id

    Returns:
        URL-safe base64 text without padding

    Raises:
        InvalidDeviceIdError: If device_id is not exactly 16 bytes
    """
    if len(device_id) != DEVICE_ID_BYTES:
        raise InvalidDeviceIdError(f"Device id must be {DEVICE_ID_BYTES} bytes, got {len(device_id)}")
    return base64.urlsafe_b64encode(device_id).decode("ascii").rstrip("=")


def decode_device_id(encoded: str) -> bytes:
    """Decode an encoded device id back to its 16 raw bytes.

    Raises:
        InvalidDeviceIdError: If the text is not base64url or is not 128 bits
    """
    if len(encoded) != ENCODED_DEVICE_ID_LENGTH:
        raise InvalidDeviceIdError(
            f"Encoded device id must be {ENCODED_DEVICE_ID_LENGTH} characters, got {len(encoded)}"
        )
    try:
        raw = base64.urlsafe_b64decode(encoded + "==")
    except (binascii.Error, ValueError) as exc:
        raise InvalidDeviceIdError(f"Encoded device id {encoded!r} is not valid base64url") from exc
    if len(raw) != DEVICE_ID_BYTES:
        raise InvalidDeviceIdError(f"Encoded device id {encoded!r} does not decode to {DEVICE_ID_BYTES} bytes")
    return raw
