from .haptics import HapticKind, HapticNotifier

__all__ = [
    'HapticKind',
    'HapticNotifier',
]
