# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Image Decode Utilities
Fetched image bytes are decoded with OpenCV (BGR numpy arrays) and
handed to the Pillow drawing surface as PIL images. Alpha survives the
bridge so transparent images composite over their cell.
"""

import cv2
import numpy as np
from PIL import Image

from tierlist.api.middleware.error_handler import TransientResourceError


# ─── Decode ──────────────────────────────────────────────────────────────────

def bytes_to_bgr(data: bytes) -> np.ndarray:
    """
    Decode raw image bytes to an 8-bit BGR or BGRA numpy array.
    Alpha is kept; grayscale is promoted to BGR and 16-bit depth scaled down.
    """
    arr = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(arr, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError("Could not decode image bytes.")

    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        img = cv2.convertScaleAbs(img)

    if img.ndim == 2:
        img = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    elif img.shape[2] == 1:
        img = cv2.cvtColor(img[:, :, 0], cv2.COLOR_GRAY2BGR)
    elif img.shape[2] == 2:
        gray, alpha = img[:, :, 0], img[:, :, 1]
        img = cv2.merge([gray, gray, gray, alpha])
    return img


def decode_image(data: bytes) -> Image.Image:
    """
    Decode fetched bytes into a PIL image ready to blit: RGBA when the
    source carries alpha, RGB otherwise.
    Raises TransientResourceError so a bad image only costs its own cell.
    """
    if not data:
        raise TransientResourceError("Image body is empty.")
    try:
        return bgr_to_pil(bytes_to_bgr(data))
    except (ValueError, cv2.error) as e:
        raise TransientResourceError(f"Could not decode image: {e}") from e


# ─── Color Space ─────────────────────────────────────────────────────────────

def bgr_to_rgb(img: np.ndarray) -> np.ndarray:
    if img.ndim == 3 and img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def bgr_to_pil(img: np.ndarray) -> Image.Image:
    """Convert a BGR/BGRA numpy array to a PIL Image (RGB or RGBA mode)."""
    return Image.fromarray(bgr_to_rgb(img))
