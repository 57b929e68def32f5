"""
Event system for the twentyone engine.

This package provides the synchronous event channel a game uses to announce
dealt hands and finished rounds.
"""

from twentyone.events.emitter import (
    EventEmitter,
    EventPriority,
    EngineEventType,
)

__all__ = ["EventEmitter", "EventPriority", "EngineEventType"]
