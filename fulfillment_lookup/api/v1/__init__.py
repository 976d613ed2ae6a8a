"""Version 1 endpoints: health check and fulfillment lookups."""
