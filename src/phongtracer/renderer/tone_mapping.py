# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

GAMMA = 2.2

@njit(cache=False)
def gamma_encode(linear):
    """Raises a linear channel value to the display gamma."""
    return math.pow(linear, GAMMA)

@njit(cache=False)
def gamma_decode(encoded):
    return math.pow(encoded, 1.0 / GAMMA)

@njit(cache=False)
def encode_channel(linear):
    """
    Gamma encodes one channel and quantizes it to a byte, rounding half up.
    Results outside [0, 255] are clipped and NaN maps to 0.
    """
    if not linear > 0.0:
        return 0
    # Clip while still a float, huge values would overflow the int conversion
    scaled = gamma_encode(linear) * 255.0 + 0.5
    if scaled >= 256.0:
        return 255
    return int(math.floor(scaled))

@njit(cache=False)
def _encode_kernel(back_buffer, front_buffer, width, height):
    for y in range(height):
        for x in range(width):
            k = (y * width + x) * 4
            # Back buffer holds R,G,B; the file wants B,G,R,A.
            front_buffer[k + 0] = encode_channel(back_buffer[k + 2])
            front_buffer[k + 1] = encode_channel(back_buffer[k + 1])
            front_buffer[k + 2] = encode_channel(back_buffer[k + 0])
            front_buffer[k + 3] = 255

def encode_back_buffer(back_buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Converts the linear float back buffer into the 8-bit BGRA front buffer
    that the TGA writer serializes.
    """
    expected = width * height * 4
    if back_buffer.size != expected:
        raise ValueError(f"Back buffer has {back_buffer.size} entries, expected {expected}")
    front_buffer = np.empty(expected, dtype=np.uint8)
    _encode_kernel(np.ascontiguousarray(back_buffer, dtype=np.float32).reshape(-1),
                   front_buffer, width, height)
    return front_buffer
