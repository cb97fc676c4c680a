"""Page view ranking service backed by the Google Analytics Reporting API."""
