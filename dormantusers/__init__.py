"""Report on dormant users in a GitHub organization by checking recent repository activity."""

__version__ = "0.1.0"