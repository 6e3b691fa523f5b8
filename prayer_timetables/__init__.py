"""Prayer timetable normalization package."""

# De versie wordt ook door de CLI en de API gerapporteerd.
__version__ = "0.1.0"
