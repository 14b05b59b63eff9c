"""
Abstract base class for enum-keyed dispatch services.

A dispatch service owns one enum of strategies and a handler per member.
Each call picks a strategy from its input and forwards to that handler:

    class Shape(Enum):
        SQUARE = "square"
        CIRCLE = "circle"

    class AreaService(EnumDispatchService[Shape]):
        strategy_enum = Shape

        def _build_handlers(self):
            return {Shape.SQUARE: self._square, Shape.CIRCLE: self._circle}

        def _determine_strategy(self, figure) -> Shape:
            return figure.shape

Setting ``strategy_enum`` makes the handler table total: construction fails
when a member has no handler, so a new enum member cannot silently go
unrendered.

Services using this pattern:
- WidgetRenderService (WidgetKind enum)
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Generic, Optional, Type, TypeVar
import logging

logger = logging.getLogger(__name__)

StrategyEnum = TypeVar('StrategyEnum', bound=Enum)


class EnumDispatchService(ABC, Generic[StrategyEnum]):
    """
    Base for services that route each call to one handler per enum member.

    Subclasses implement _build_handlers() and _determine_strategy(), and may
    set ``strategy_enum`` to require a handler for every member.
    """

    strategy_enum: ClassVar[Optional[Type[Enum]]] = None

    def __init__(self):
        handlers = self._build_handlers()
        if not handlers:
            raise ValueError(f"{self.__class__.__name__}: Handler registry cannot be empty")

        if self.strategy_enum is not None:
            missing = [member for member in self.strategy_enum if member not in handlers]
            if missing:
                raise ValueError(
                    f"{self.__class__.__name__}: No handler for "
                    f"{', '.join(member.name for member in missing)}"
                )

        self._handlers: Dict[StrategyEnum, Callable[..., Any]] = dict(handlers)
        logger.debug(f"{self.__class__.__name__}: Registered {len(self._handlers)} handlers")

    @abstractmethod
    def _build_handlers(self) -> Dict[StrategyEnum, Callable[..., Any]]:
        """Return the handler for each strategy."""

    @abstractmethod
    def _determine_strategy(self, context: Any, **kwargs) -> StrategyEnum:
        """Pick the strategy for a call."""

    def dispatch(self, context: Any, **kwargs) -> Any:
        """
        Route a call to the handler of its strategy.

        Args:
            context: Primary input, passed to both _determine_strategy() and the handler
            **kwargs: Forwarded to both as well

        Returns:
            Result from the handler

        Raises:
            KeyError: If the determined strategy has no handler
        """
        strategy = self._determine_strategy(context, **kwargs)
        handler = self._handlers.get(strategy)
        if handler is None:
            raise KeyError(
                f"{self.__class__.__name__}: No handler registered for strategy {strategy}. "
                f"Available strategies: {list(self._handlers.keys())}"
            )

        logger.debug(f"{self.__class__.__name__}: Dispatching to {strategy.value} handler")
        return handler(context, **kwargs)

    def get_registered_strategies(self) -> list[StrategyEnum]:
        return list(self._handlers.keys())

    def has_strategy(self, strategy: StrategyEnum) -> bool:
        return strategy in self._handlers
