"""REST API and live board socket for Mission Control."""
