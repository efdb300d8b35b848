"""
BloodConnect API - donor and hospital registration with blood matching.
"""
from .server import create_app

__version__ = "1.0.0"
