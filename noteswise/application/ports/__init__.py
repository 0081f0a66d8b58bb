"""Ports to external collaborators shared by several bounded contexts."""

from .speech_service import SpeechServiceProtocol

__all__ = ["SpeechServiceProtocol"]
