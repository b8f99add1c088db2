"""Postural angle measurements from anatomical landmarks marked on photos"""

__version__ = "1.0.0"
