"""
Seed data for the freelance dashboard.
"""

from .seed import default_seed_state, load_seed_file, dump_state

__all__ = [
    "default_seed_state",
    "load_seed_file",
    "dump_state",
]
