"""Browser end-to-end suite and site probe for the AXIS6 web application."""

__version__ = "1.0.0"
