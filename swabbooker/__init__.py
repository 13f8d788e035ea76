"""SwabBooker - interactive COVID test appointment booking client."""

__version__ = "1.0.0"
