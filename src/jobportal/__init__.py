"""In-memory job portal core: profiles, jobs, filtering and URI routing."""

__version__ = "0.1.0"
