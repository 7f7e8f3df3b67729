# wallet_deeplinks/qt_bridge.py
from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, Signal

from .backend import AlertPresenter, Navigator


class NavigationSignals(QObject):
    navigation_requested = Signal(str, object)  # route, params


class AlertSignals(QObject):
    alert_raised = Signal(str, str)             # title, message
    toast_raised = Signal(str, int)             # message, autodismiss ms
    notification_raised = Signal(str, str, str, int)


class QtNavigator(Navigator):
    """Navigator that a Qt shell connects its screens to."""

    def __init__(self, parent: Optional[QObject] = None):
        self.signals = NavigationSignals(parent)

    def navigate(self, route: str, params: Optional[Dict[str, Any]] = None) -> None:
        self.signals.navigation_requested.emit(route, params or {})


class QtAlertPresenter(AlertPresenter):
    def __init__(self, parent: Optional[QObject] = None):
        self.signals = AlertSignals(parent)

    def alert(self, title: str, message: str) -> None:
        self.signals.alert_raised.emit(title, message)

    def toast(self, message: str, autodismiss_ms: int) -> None:
        self.signals.toast_raised.emit(message, autodismiss_ms)

    def notify(self, title: str, description: str, status: str, duration_ms: int) -> None:
        self.signals.notification_raised.emit(title, description, status, duration_ms)
