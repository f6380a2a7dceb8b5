"""Local machine health snapshot: probes, aggregation and reporting."""

__version__ = "1.0.0"
