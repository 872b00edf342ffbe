"""Annotation session state and pointer interaction mapping."""

from raindrop.session.state import AnnotationSession, SessionStateError, UnknownRegion

__all__ = ["AnnotationSession", "SessionStateError", "UnknownRegion"]
