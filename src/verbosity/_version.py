"""Version information for verbosity. setup.py reads __version__ from here."""

__version__ = "0.1.0"
__app_name__ = "verbosity"
