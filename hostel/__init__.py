"""
Hostel Registration

Validation pipeline, notification hub and layered registration for
hostel applicants.
"""

__version__ = "0.1.0"
