"""
polyrecon — exact polynomial reconstruction of Shamir shares

Contains:
- polyrecon/core/            : Rational arithmetic, base decoding, Lagrange interpolation
- polyrecon/reconstruction/  : Driver (decode → interpolate → verify → report)
- polyrecon/cli.py           : stdin/stdout boundary
"""

__version__ = "0.1.0"
