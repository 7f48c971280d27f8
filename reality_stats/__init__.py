"""
Reality Stats - Prize and Audience Reporting Engine

Turns snapshots of reality shows, their participants and the prizes they
won into ranked, filtered and summarized reports.
"""

__version__ = "0.1.0"
__author__ = "Reality Stats Team"
