"""Geographic utilities for journey validation.

This subpackage contains the pure functions behind location and
journey validation: great-circle distance, travel-time plausibility,
and the offline table of well-known cities.
"""
