"""
Match Summary Backend Application Package.

Backend-for-frontend that reshapes Riot API account, match, ranked and
mastery data into the compact format consumed by the web client.
"""

__version__ = "1.0.0"
