"""
Parity Symmetry Simulator

Service layer for an interactive demonstration of how unlikely exact
parity balance is in randomly generated chapter data.
"""

__version__ = "0.1.0"
__author__ = "Parity Symmetry Team"
