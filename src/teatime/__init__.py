"""teatime — a terminal journal of daily notes rolled up into weekly,
monthly, quarterly and yearly summaries."""

__version__ = "0.1.0"
