"""Caltrain real-time status page scraper."""
