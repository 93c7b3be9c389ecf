from .utils import (
    to_radians,
    to_degrees,
    WrapTo180,
    WrapTo360,
    clamp_unit,
)
from .log import configure_logging

__all__ = [
    'to_radians',
    'to_degrees',
    'WrapTo180',
    'WrapTo360',
    'clamp_unit',
    'configure_logging',
]
