"""
Stylist Service (v1.1.0)
Weather-aware daily outfit scenarios rendered onto the subscriber's own photo.
"""
__version__ = "1.1.0"
