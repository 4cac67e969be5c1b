"""samwizard: runtime selection step of a new SAM application wizard."""

__version__ = "0.1.0"
