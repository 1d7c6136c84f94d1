"""Nagios-compatible plugin checking BrandMeister repeater last-seen status."""

__version__ = "0.1.0"

from check_brandmeister.checks import last_seen_minutes

__all__ = ["__version__", "last_seen_minutes"]
