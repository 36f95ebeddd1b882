# chancellor/__init__.py
APPLICATION_TITLE = "Chancellor"
__version__ = "1.0.0"
