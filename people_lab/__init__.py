"""
people_lab
==========

Document-database walkthrough over a single MongoDB collection of people.
"""

__version__ = "1.0.0"
