"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with swappable production/mock implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider tagged with mock-selection metadata.

    Concrete providers leave ``__mock_component__`` unset and have no
    subclasses. A mockable component names itself on a base class and
    ships one subclass per implementation, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this provider is a component base with implementations."""
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, mock: bool) -> type["ProviderBase"] | None:
        """Return the subclass whose ``__is_mock__`` equals ``mock``."""
        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == mock:
                return subclass
        return None
