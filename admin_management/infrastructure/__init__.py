"""Infrastructure: persistence, security, and outbound notification adapters."""
