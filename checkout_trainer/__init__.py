"""
Checkout trainer - single-player darts checkout practice simulator.
"""
__version__ = "0.1.0"
