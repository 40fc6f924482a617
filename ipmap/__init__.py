"""
IP Map Navigator: login API and geolocation lookup client.
"""

__version__ = "1.0.0"
