from .config import MediaConfig, Settings, settings, validate_settings

__all__ = [
    'MediaConfig',
    'Settings',
    'settings',
    'validate_settings',
]
