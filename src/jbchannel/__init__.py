"""jbchannel - Jupiter Broadcasting podcast catalog and feed aggregator."""

__version__ = "0.1.0"
