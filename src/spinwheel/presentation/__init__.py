"""Presentation: layout, result modal and celebration effects."""

from spinwheel.presentation.layout import Box, Layout, compute_layout
from spinwheel.presentation.modal import ResultModal, ModalHit
from spinwheel.presentation.effects import (
    ConfettiPiece,
    FlashRing,
    EffectsLayer,
    DEFAULT_CONFETTI_COLORS,
)

__all__ = [
    "Box",
    "Layout",
    "compute_layout",
    "ResultModal",
    "ModalHit",
    "ConfettiPiece",
    "FlashRing",
    "EffectsLayer",
    "DEFAULT_CONFETTI_COLORS",
]
