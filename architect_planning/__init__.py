"""
Architectural Planning Adapter

Lets a client request an architectural plan together with a raw-material
cost estimate through a single planning interface.
"""

__version__ = "1.0.0"
__author__ = "Architectural Planning Team"
