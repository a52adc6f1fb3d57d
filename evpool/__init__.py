"""
evpool — подбор электромобилей для групп пассажиров.
"""

__version__ = "1.0.0"
