"""
Tween module - easing curves for windowed part motion.

Usage:
    from explodeview.tween import Ease, evaluate

    eased = evaluate(Ease.IN_OUT_CUBIC, 0.4)   # 0.256
"""

from explodeview.tween.ease import Ease, evaluate, parse

__all__ = [
    "Ease",
    "evaluate",
    "parse",
]
