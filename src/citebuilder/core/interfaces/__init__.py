from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .templating import TemplateEngineProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TemplateEngineProtocol',
]
