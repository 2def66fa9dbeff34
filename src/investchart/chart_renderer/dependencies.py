from __future__ import annotations

import matplotlib

matplotlib.use("Agg")  # Use non-GUI backend to prevent threading issues
import matplotlib.pyplot as plt
import numpy as np

__all__ = [
    "matplotlib",
    "plt",
    "np",
]
