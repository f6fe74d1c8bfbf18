from __future__ import annotations

from typing import IO

from PIL import Image, UnidentifiedImageError

from ..core.exceptions import ValidationError


def _zbar_decode(img: Image.Image) -> list:
    # pyzbar loads the native zbar library on import.
    from pyzbar.pyzbar import decode

    return decode(img)


def decode_card_image(stream: IO) -> str:
    """Decode the first barcode/QR code found in an uploaded photo."""
    try:
        img = Image.open(stream).convert("RGB")
    except UnidentifiedImageError as e:
        raise ValidationError("Uploaded file is not an image") from e
    except OSError as e:
        # truncated or corrupt image data
        raise ValidationError("Could not read the uploaded image") from e

    decoded = _zbar_decode(img)
    if not decoded:
        raise ValidationError("No barcode or QR code detected in the image")
    try:
        return decoded[0].data.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise ValidationError("Scanned code is not a valid school ID") from e
