"""Perceptual color science: CAM16, HCT, contrast, blending, dislike fixing and dynamic colors."""

__version__ = "0.1.0"