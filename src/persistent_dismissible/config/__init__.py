"""Config – 12-factor settings and service wiring."""
