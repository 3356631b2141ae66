"""Line prompt used by save-as and search."""

from .controller import NO_CALLBACK, NoCallback, PromptCallback, PromptController

__all__ = ["NO_CALLBACK", "NoCallback", "PromptCallback", "PromptController"]
