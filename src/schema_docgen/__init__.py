"""Reference documentation generator for JSON Schema type graphs."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
