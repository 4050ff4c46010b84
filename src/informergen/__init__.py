"""informergen: plans informer packages for versioned API resource types."""

__version__ = "0.1.0"
