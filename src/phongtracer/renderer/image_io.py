# renderer/image_io.py
import os
from typing import Tuple
import numpy as np
from PIL import Image

TGA_HEADER_SIZE = 18
TGA_TRUECOLOR = 2
TGA_BPP = 32
MAX_TGA_DIMENSION = 0xFFFF

def tga_header(width: int, height: int) -> bytes:
    """
    Builds the 18-byte header of an uncompressed 32bpp truecolor TGA.
    Width and height are little-endian 16-bit fields at offsets 12-15.
    """
    if not (0 < width <= MAX_TGA_DIMENSION and 0 < height <= MAX_TGA_DIMENSION):
        raise ValueError(f"TGA dimensions must be in 1..{MAX_TGA_DIMENSION}, got {width}x{height}")
    return bytes([
        0, 0, TGA_TRUECOLOR,
        0, 0, 0, 0,
        0,
        0, 0, 0, 0,
        width & 0xFF, (width & 0xFF00) >> 8,
        height & 0xFF, (height & 0xFF00) >> 8,
        TGA_BPP, 0,
    ])

def _check_front_buffer(front_buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    data = np.ascontiguousarray(front_buffer, dtype=np.uint8).reshape(-1)
    if data.size != width * height * 4:
        raise ValueError(f"Front buffer has {data.size} bytes, expected {width * height * 4}")
    return data

def write_tga(path: str, front_buffer: np.ndarray, width: int, height: int) -> str:
    """
    Writes the BGRA front buffer as an uncompressed TGA file and returns the path.
    Rows are written in buffer order with a descriptor byte of 0.
    """
    header = tga_header(width, height)
    data = _check_front_buffer(front_buffer, width, height)
    with open(path, "wb") as f:
        f.write(header)
        f.write(data.tobytes())
    return path

def read_tga(path: str) -> Tuple[int, int, bytes]:
    """
    Reads back a file written by write_tga.

    Returns:
        (width, height, pixel_bytes) with the pixels still in BGRA order.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is truncated or not 32bpp truecolor
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"TGA file not found: {path}")
    with open(path, "rb") as f:
        blob = f.read()
    if len(blob) < TGA_HEADER_SIZE:
        raise ValueError(f"Truncated TGA header in {path}")
    if blob[2] != TGA_TRUECOLOR or blob[16] != TGA_BPP:
        raise ValueError(f"Unsupported TGA image type {blob[2]} / {blob[16]}bpp in {path}")
    width = blob[12] | (blob[13] << 8)
    height = blob[14] | (blob[15] << 8)
    pixels = blob[TGA_HEADER_SIZE + blob[0]:]
    if len(pixels) < width * height * 4:
        raise ValueError(f"Truncated TGA pixel data in {path}")
    return width, height, pixels[:width * height * 4]

def front_buffer_to_rgb(front_buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Reorders the BGRA front buffer into an (height, width, 3) RGB array, top
    row first, the way it appears in a TGA viewer.
    """
    data = _check_front_buffer(front_buffer, width, height).reshape(height, width, 4)
    # Descriptor 0 means the first stored row is the bottom of the image.
    return np.ascontiguousarray(data[::-1, :, 2::-1])

def save_png(path: str, front_buffer: np.ndarray, width: int, height: int) -> str:
    """Writes the front buffer as a PNG through Pillow and returns the path."""
    rgb = front_buffer_to_rgb(front_buffer, width, height)
    Image.fromarray(rgb).save(path, format="PNG")
    return path
