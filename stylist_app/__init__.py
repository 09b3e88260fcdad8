"""Application wiring: configuration, logging and the stylist façade."""
