"""Test suite for the Liverpool FC data API."""
