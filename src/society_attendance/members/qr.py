from __future__ import annotations

import io

import qrcode


def member_card_png(school_id: str) -> io.BytesIO:
    """PNG QR code encoding the school ID, as printed on membership cards."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=2,
    )
    qr.add_data(school_id)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf
