"""Bucket → topic → queue notification provisioner."""

__version__ = "0.1.0"
