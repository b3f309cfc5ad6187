"""
main.py

Functions source entry point. The Firebase CLI discovers deployed functions
from the module-level names of main.py.
"""

from dispatcher.main import send_alert_notifications

__all__ = ["send_alert_notifications"]
