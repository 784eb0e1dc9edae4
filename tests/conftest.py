"""Pytest configuration shared across test modules."""

import logging

logging.getLogger("periodicals").setLevel(logging.DEBUG)
