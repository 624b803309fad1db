"""
explodeview - timeline-driven exploded views of rectangular assemblies.

Основные модули:
- assembly - детали, параметры и генератор раскладки оконного блока
- animation - таймлайн и интерполяция положений деталей
- tween - функции сглаживания
- view - фасад для рендерера и элементов управления
"""

from .errors import ConfigurationError, ExplodeViewError, FlushFitError, LayoutError
from .tween import Ease
from .assembly import (
    AnimationWindow,
    PartDescriptor,
    PartRole,
    StructuralParameters,
    VisualHints,
    WallParameters,
    build_wall_backdrop,
    build_window_unit,
)
from .animation import (
    AnimationState,
    FrameClock,
    PlaybackState,
    TimelineController,
    TimelineSettings,
    interpolate,
    interpolate_all,
)
from .view import ExplodedView, ViewSnapshot, create_window_view

__version__ = '0.1.0'

__all__ = [
    'ConfigurationError',
    'ExplodeViewError',
    'FlushFitError',
    'LayoutError',
    'Ease',
    'AnimationWindow',
    'PartDescriptor',
    'PartRole',
    'StructuralParameters',
    'VisualHints',
    'WallParameters',
    'build_wall_backdrop',
    'build_window_unit',
    'AnimationState',
    'FrameClock',
    'PlaybackState',
    'TimelineController',
    'TimelineSettings',
    'interpolate',
    'interpolate_all',
    'ExplodedView',
    'ViewSnapshot',
    'create_window_view',
]
