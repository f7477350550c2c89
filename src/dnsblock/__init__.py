"""dnsblock — blocklist membership queries over a chained hash table."""

__version__ = "0.1.0"
