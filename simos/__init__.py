"""
SiMOS - a small shell over a virtual filesystem rooted at a real directory.
"""

__version__ = "1.0.0"
