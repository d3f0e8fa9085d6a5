"""
Waste Segregation - classify waste item descriptions as wet or dry.

Entry point: ``waste-segregation`` (see ``waste_segregation.cli``).
"""

__version__ = "0.1.0"
