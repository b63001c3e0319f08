"""
Podcast export package.

Copies downloaded Apple Podcasts episodes out of the app cache into a
folder per podcast, named from the Podcasts library metadata.
"""

__version__ = "1.0.0"
