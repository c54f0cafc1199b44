"""
Utility modules for EasyDict.
"""

from easydict.utils.logging_config import component_logger, setup_logging

__all__ = [
    'component_logger',
    'setup_logging'
]
