#!/usr/bin/env python3
"""Seed a NumPy generator from one camera frame.

Captures a frame, keeps it as seed.png so the seed can be reproduced later,
and draws a few numbers from a generator keyed by the seed.

Usage:
    pip install -e ".[camera]"
    python examples/python/seed_from_camera.py
"""

from photoseed import PhotoSeedError, derive_seed
from photoseed.acquirers import CameraAcquirer, save_frame
from photoseed.numpy_compat import generator_from_seed

try:
    with CameraAcquirer(warmup_frames=5) as camera:
        frame = camera.acquire_frame()
except PhotoSeedError as e:
    raise SystemExit(f"capture failed ({type(e).__name__}): {e}")

print(f"Captured {frame.width}x{frame.height} {frame.format.value} from {frame.device}")
save_frame(frame, "seed.png")

seed = derive_seed(frame)
print(f"seed: {seed.hex()}")

rng = generator_from_seed(seed)
print(f"integers: {rng.integers(0, 100, size=10).tolist()}")
print(f"floats:   {rng.random(3).round(4).tolist()}")
