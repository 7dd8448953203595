"""
Recognition backend registry.
"""

from typing import Dict, Optional, Type

from ..config.settings import GestureConfig, RecognitionConfig
from .base import RecognizerBackend
from .segment_recognizer import GestureRecognizer
from .template_recognizer import TemplateRecognizer

BACKENDS: Dict[str, Type[RecognizerBackend]] = {
    GestureRecognizer.NAME: GestureRecognizer,
    TemplateRecognizer.NAME: TemplateRecognizer,
}


def create_recognizer(backend: str = GestureConfig.BACKEND,
                      config: Optional[RecognitionConfig] = None,
                      templates_path: Optional[str] = None) -> RecognizerBackend:
    """
    Build a fresh recognizer instance.

    Args:
        backend: 'segment' or 'template'
        config: Template matching sensitivity (template backend only)
        templates_path: Extra JSON templates to load (template backend only)

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown recognizer backend '{backend}'. "
                         f"Expected one of: {', '.join(sorted(BACKENDS))}")
    if backend == TemplateRecognizer.NAME:
        return TemplateRecognizer(config=config, templates_path=templates_path)
    return GestureRecognizer()
