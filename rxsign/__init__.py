# rxsign/__init__.py
"""Sign and verify electronic prescriptions with RSA-SHA256."""
__version__ = "0.1.0"
