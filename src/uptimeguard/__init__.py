"""uptimeguard - provision Cloud Functions that ping a server and restart its VM"""

__version__ = "0.1.0"
