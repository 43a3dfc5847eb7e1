"""GrowthKit - marketing tools marketplace API."""

__version__ = "1.0.0"
